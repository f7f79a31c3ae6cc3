"""Command line front end running the bundled reaction network models."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .models import abc, circadian_rhythm, seihr
from .simulator import Simulator
from .utils import export_to_dot, plot_time_series
from .vessel import Vessel

PathLike = Union[str, Path]

ABC_ENDTIME = 2000.0
CIRCADIAN_ENDTIME = 48.0
SEIHR_ENDTIME = 100.0
SEIHR_POPULATION = 10_000
NNJ = 589_755
NDK = 5_822_763
SIM_COUNT = 100


@dataclass(frozen=True)
class _AbcSetup:
    a: int
    b: int
    c: int


_ABC_SETUPS = (
    _AbcSetup(100, 0, 1),
    _AbcSetup(100, 0, 2),
    _AbcSetup(50, 50, 1),
)


def collect_series(
    simulator: Simulator,
    endtime: float,
    scale: Optional[Mapping[str, int]] = None,
) -> Tuple[List[float], Dict[str, List[int]]]:
    """Run one simulation and gather the trajectory of every visible species.

    Internal species are left out. A species named in ``scale`` is stored
    multiplied by its factor under the name ``"<name>*<factor>"``.
    """
    scale = scale or {}
    times: List[float] = []
    values: Dict[str, List[int]] = {}
    for time, state in simulator.trajectory(endtime):
        times.append(time)
        for key in state.keys(exclude_internal=True):
            factor = scale.get(key)
            if factor is None:
                values.setdefault(key, []).append(state[key])
            else:
                values.setdefault(f"{key}*{factor}", []).append(state[key] * factor)
    return times, values


def _render(
    vessel: Vessel,
    title: str,
    plot_path: Path,
    dot_path: Path,
    times: Sequence[float],
    values: Mapping[str, Sequence[int]],
    prefix: str = "",
) -> List[Path]:
    print(f"{prefix}Generating plot...")
    plot_time_series(title, str(plot_path), times, values)
    print(f"{prefix}Generating dot graph...")
    with open(dot_path, "w", encoding="utf-8") as stream:
        export_to_dot(stream, vessel)
    return [plot_path, dot_path]


def run_abc(output_dir: PathLike = ".", endtime: float = ABC_ENDTIME) -> List[Path]:
    """Simulate the three A/B/C set-ups and write a plot and a graph for each."""
    directory = Path(output_dir)
    written: List[Path] = []
    for number, setup in enumerate(_ABC_SETUPS, start=1):
        prefix = f"{number}: "
        vessel = abc(setup.a, setup.b, setup.c)
        print(f"{prefix}Simulating...")
        times, values = collect_series(Simulator(vessel), endtime)
        title = f"A={setup.a}, B={setup.b}, C={setup.c}"
        written += _render(
            vessel,
            title,
            directory / f"plot_abc_{number}.png",
            directory / f"graph_abc_{number}.dot",
            times,
            values,
            prefix,
        )
    return written


def run_circadian(
    output_dir: PathLike = ".", endtime: float = CIRCADIAN_ENDTIME
) -> List[Path]:
    """Simulate the circadian rhythm model and write its plot and graph."""
    directory = Path(output_dir)
    vessel = circadian_rhythm()
    print("Simulating...")
    times, values = collect_series(Simulator(vessel), endtime)
    return _render(
        vessel,
        "CIRCADIAN RHYTHM",
        directory / "plot_circadian_rhythm.png",
        directory / "graph_circadian_rhythm.dot",
        times,
        values,
    )


def run_seihr(output_dir: PathLike = ".", endtime: float = SEIHR_ENDTIME) -> List[Path]:
    """Simulate the SEIHR model for 10000 people and write its plot and graph.

    Hospitalised counts are plotted multiplied by 1000 to make them visible.
    """
    directory = Path(output_dir)
    vessel = seihr(SEIHR_POPULATION)
    print("Simulating...")
    times, values = collect_series(Simulator(vessel), endtime, {"H": 1000})
    return _render(
        vessel,
        "SEIHR COVID-19",
        directory / "plot_seihr_covid19.png",
        directory / "graph_seihr_covid19.dot",
        times,
        values,
    )


def peak_hospitalized(population: int, endtime: float = SEIHR_ENDTIME) -> int:
    """Return the largest hospitalised count seen in one SEIHR run.

    Only the running maximum is kept; the trajectory is not stored.
    """
    peak = 0
    for _, state in Simulator(seihr(population)).trajectory(endtime):
        peak = max(peak, state["H"])
    return peak


def average_peak(
    population: int, sim_count: int = SIM_COUNT, endtime: float = SEIHR_ENDTIME
) -> float:
    """Return the mean hospitalised peak over concurrent SEIHR runs."""
    if sim_count <= 0:
        raise ValueError("sim_count must be positive")
    peaks = [0] * sim_count

    def observe(index: int, _time: float, state) -> None:
        if "H" in state:
            peaks[index] = max(peaks[index], state["H"])

    Simulator(seihr(population)).simulate_multiple(sim_count, endtime, observe)
    return sum(peaks) / len(peaks)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stochsim", description="Run stochastic simulations of reaction networks."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, endtime, help_text in (
        ("abc", ABC_ENDTIME, "simulate the A + C -> B + C network"),
        ("circadian", CIRCADIAN_ENDTIME, "simulate the circadian rhythm model"),
        ("seihr", SEIHR_ENDTIME, "simulate the SEIHR epidemic model"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--output-dir", default=".", help="directory for the output files")
        sub.add_argument("--endtime", type=float, default=endtime)

    estimate = commands.add_parser(
        "estimate", help="estimate the hospitalised peak for given populations"
    )
    estimate.add_argument(
        "--population", type=int, action="append", help="population size (repeatable)"
    )
    estimate.add_argument("--endtime", type=float, default=SEIHR_ENDTIME)

    multiple = commands.add_parser(
        "multiple", help="average the hospitalised peak over many runs"
    )
    multiple.add_argument("--population", type=int, default=SEIHR_POPULATION)
    multiple.add_argument("--count", type=int, default=SIM_COUNT)
    multiple.add_argument("--endtime", type=float, default=SEIHR_ENDTIME)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the command line interface."""
    args = _build_parser().parse_args(argv)

    if args.command == "abc":
        run_abc(args.output_dir, args.endtime)
    elif args.command == "circadian":
        run_circadian(args.output_dir, args.endtime)
    elif args.command == "seihr":
        run_seihr(args.output_dir, args.endtime)
    elif args.command == "estimate":
        for population in args.population or [NNJ, NDK]:
            print(f"({population}) Simulating...")
            print(f"Max H ({population}): {peak_hospitalized(population, args.endtime)}")
    elif args.command == "multiple":
        if args.count <= 0:
            print("error: --count must be positive")
            return 2
        print(f"Running {args.count} simulations...")
        average = average_peak(args.population, args.count, args.endtime)
        print(f"AVERAGE PEAK-H: {average}")

    print("Finished!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())