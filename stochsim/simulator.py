"""Stochastic simulation of a reaction network held in a vessel."""

from __future__ import annotations

import math
import os
import random
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterator, Optional, Tuple

from .reaction import ReactionRule
from .symbol_table import SymbolTable
from .vessel import Vessel

State = SymbolTable[str, int]
StateObserver = Callable[[float, State], None]
ThreadObserver = Callable[[int, float, State], None]


def _delay(rule: ReactionRule, state: State, rng: random.Random) -> float:
    """Draw the waiting time of a rule, or infinity if it cannot fire."""
    rate = rule.rate
    for reactant in rule.input:
        value = state[reactant.name] if reactant.name in state else 0
        if value <= 0:
            return math.inf
        rate *= value
    if rate <= 0:
        return math.inf
    return rng.expovariate(rate)


def _apply(rule: ReactionRule, state: State) -> None:
    """Consume the inputs of a rule and produce its outputs."""
    for reactant in rule.input:
        state[reactant.name] -= 1
    for product in rule.output:
        state[product.name] += 1


class Simulator:
    """Runs the stochastic simulation algorithm over a vessel.

    Each run starts from a fresh copy of the vessel's initial counts. A seed
    makes the sequence of runs reproducible; without one the runs are seeded
    from the operating system.
    """

    def __init__(self, vessel: Vessel, seed: Optional[int] = None) -> None:
        self._vessel = vessel
        self._seeds = random.Random(seed)
        self._lock = threading.Lock()

    @property
    def vessel(self) -> Vessel:
        """The vessel being simulated."""
        return self._vessel

    def _new_rng(self) -> random.Random:
        with self._lock:
            return random.Random(self._seeds.getrandbits(64))

    def _run(self, endtime: float, rng: random.Random) -> Iterator[Tuple[float, State]]:
        state = self._vessel.symbols.copy()
        rules = self._vessel.rules
        time = 0.0
        yield time, state
        while time <= endtime:
            dt, rule = min(
                ((_delay(rule, state, rng), rule) for rule in rules),
                key=lambda pair: pair[0],
                default=(math.inf, None),
            )
            if math.isinf(dt) or rule is None:
                break
            _apply(rule, state)
            time += dt
            yield time, state

    def trajectory(self, endtime: float) -> Iterator[Tuple[float, State]]:
        """Lazily yield ``(time, state)`` after the start and every reaction.

        The same state table is yielded each time and changes as the run
        goes on; copy it to keep a snapshot.
        """
        return self._run(endtime, self._new_rng())

    def simulate(self, endtime: float, observer: StateObserver) -> None:
        """Run one simulation, calling ``observer(time, state)`` at each step."""
        for time, state in self.trajectory(endtime):
            observer(time, state)

    def simulate_multiple(
        self, sim_count: int, endtime: float, observer: ThreadObserver
    ) -> None:
        """Run several simulations concurrently.

        ``observer(index, time, state)`` is called from worker threads, with
        ``index`` telling the runs apart. Errors raised in any run propagate.
        """
        if sim_count <= 0:
            return
        rngs = [self._new_rng() for _ in range(sim_count)]

        def run(index: int, rng: random.Random) -> None:
            for time, state in self._run(endtime, rng):
                observer(index, time, state)

        workers = min(sim_count, (os.cpu_count() or 1) + 4)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(run, index, rng) for index, rng in enumerate(rngs)]
            for future in futures:
                future.result()