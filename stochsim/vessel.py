"""A vessel holding the species and reaction rules of a network."""

from __future__ import annotations

from typing import List, Tuple

from .reaction import Reactant, ReactionRule
from .symbol_table import SymbolTable


class Vessel:
    """Container of species with initial counts and the rules acting on them."""

    def __init__(self) -> None:
        self._symbols: SymbolTable[str, int] = SymbolTable()
        self._rules: List[ReactionRule] = []

    def add(self, name: str, initial_value: int, is_internal: bool = False) -> Reactant:
        """Register a species and return the reactant used to write rules."""
        self._symbols.add(name, initial_value, is_internal)
        return Reactant(name, initial_value)

    def add_rule(self, rule: ReactionRule) -> ReactionRule:
        """Append a reaction rule and return it."""
        if not isinstance(rule, ReactionRule):
            raise TypeError(f"expected a ReactionRule, got {type(rule).__name__}")
        self._rules.append(rule)
        return rule

    @property
    def symbols(self) -> SymbolTable[str, int]:
        """The species table with initial counts."""
        return self._symbols

    @property
    def rules(self) -> Tuple[ReactionRule, ...]:
        """The reaction rules in the order they were added."""
        return tuple(self._rules)