"""Plotting, printing and graph export helpers for simulations."""

from __future__ import annotations

from typing import Mapping, Sequence, TextIO

from matplotlib.figure import Figure

from .symbol_table import SymbolTable
from .vessel import Vessel


def plot_time_series(
    title: str,
    file_name: str,
    times: Sequence[float],
    values: Mapping[str, Sequence[int]],
) -> None:
    """Plot each series against time and save the figure to ``file_name``."""
    if not times or not values:
        raise ValueError("Empty time vector or values.")
    for series in values.values():
        if len(series) != len(times):
            raise ValueError("Series size does not match time vector size.")

    figure = Figure()
    axes = figure.subplots()
    for key, series in values.items():
        axes.plot(list(times), [float(value) for value in series], label=key)
    axes.set_title(title)
    axes.set_xlabel("Time")
    axes.set_ylabel("Quantity")
    axes.legend()
    figure.savefig(file_name)


def print_vessel_state(symbols: SymbolTable[str, int]) -> None:
    """Print every symbol and its value to standard output."""
    print("Vessel state of symbols:")
    for key in symbols.keys():
        print(f"  {key}: {symbols[key]}")


def export_to_dot(stream: TextIO, vessel: Vessel) -> None:
    """Write the reaction network as a Graphviz digraph."""
    symbols = vessel.symbols
    stream.write("digraph {\n")
    for symbol in symbols.keys(exclude_internal=True):
        stream.write(
            f' {symbol} [label="{symbol}", shape=box, style=filled, fillcolor=cyan];\n'
        )
    for counter, rule in enumerate(vessel.rules):
        node = f"r{counter}"
        stream.write(
            f' {node} [label="{rule.rate:g}", shape=oval, style=filled, fillcolor=yellow];\n'
        )
        for reactant in rule.input:
            stream.write(f" {reactant.name} -> {node};\n")
        for product in rule.output:
            if not symbols.is_internal(product.name):
                stream.write(f" {node} -> {product.name};\n")
    stream.write("}\n")