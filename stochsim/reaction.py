"""Reactants and the operator syntax for writing reaction rules.

A rule is written as ``A + B >> rate >> C + D``: the reactants on the left
combine, ``>> rate`` attaches the rate, and the final ``>>`` names the
products.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Tuple, Union


def _as_rate(value: object) -> float | None:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return float(value)


@dataclass(frozen=True)
class Reactant:
    """A named species together with its initial quantity."""

    name: str
    quantity: int

    def __add__(self, other: object) -> "Combination":
        if isinstance(other, Reactant):
            return Combination((self, other))
        if isinstance(other, Combination):
            return Combination((self, *other.reactants))
        return NotImplemented

    def __rshift__(self, rate: object) -> "ReactionRate":
        value = _as_rate(rate)
        if value is None:
            return NotImplemented
        return ReactionRate(Combination((self,)), value)


@dataclass(frozen=True)
class Combination:
    """An ordered group of reactants on one side of a rule."""

    reactants: Tuple[Reactant, ...] = ()

    def __add__(self, other: object) -> "Combination":
        if isinstance(other, Reactant):
            return Combination((*self.reactants, other))
        if isinstance(other, Combination):
            return Combination((*self.reactants, *other.reactants))
        return NotImplemented

    def __rshift__(self, rate: object) -> "ReactionRate":
        value = _as_rate(rate)
        if value is None:
            return NotImplemented
        return ReactionRate(self, value)

    def __iter__(self):
        return iter(self.reactants)

    def __len__(self) -> int:
        return len(self.reactants)

    def __str__(self) -> str:
        return " + ".join(reactant.name for reactant in self.reactants)


@dataclass(frozen=True)
class ReactionRate:
    """The inputs of a rule with its rate, awaiting the products."""

    input: Combination
    rate: float

    def __rshift__(self, output: object) -> "ReactionRule":
        if isinstance(output, Reactant):
            return ReactionRule(self.input, self.rate, Combination((output,)))
        if isinstance(output, Combination):
            return ReactionRule(self.input, self.rate, output)
        return NotImplemented


@dataclass(frozen=True)
class ReactionRule:
    """A reaction turning the input reactants into the outputs at a rate."""

    input: Combination
    rate: float
    output: Combination

    def __str__(self) -> str:
        return f"{self.input} >> {self.rate:g} >>= {self.output}"


Side = Union[Reactant, Combination]