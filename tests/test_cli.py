import pytest

from stochsim.cli import (
    average_peak,
    collect_series,
    main,
    peak_hospitalized,
    run_abc,
    run_circadian,
    run_seihr,
)
from stochsim.models import abc, circadian_rhythm, seihr
from stochsim.simulator import Simulator


def test_collect_series_lengths_match_and_time_grows():
    times, values = collect_series(Simulator(abc(100, 0, 1)), 50)
    assert times[0] == 0.0
    assert all(later >= earlier for earlier, later in zip(times, times[1:]))
    assert set(values) == {"A", "B", "C"}
    assert all(len(series) == len(times) for series in values.values())


def test_collect_series_conserves_a_plus_b():
    times, values = collect_series(Simulator(abc(100, 0, 2)), 100)
    totals = {a + b for a, b in zip(values["A"], values["B"])}
    assert totals == {100}
    assert set(values["C"]) == {2}


def test_collect_series_starts_from_initial_counts():
    _, values = collect_series(Simulator(abc(50, 50, 1)), 10)
    assert values["A"][0] == 50
    assert values["B"][0] == 50


def test_collect_series_skips_internal_species():
    _, values = collect_series(Simulator(circadian_rhythm()), 0.2)
    assert "env" not in values
    assert "A" in values


def test_collect_series_scales_named_species():
    _, values = collect_series(Simulator(seihr(10000)), 1, {"H": 1000})
    assert "H" not in values
    assert "H*1000" in values
    assert all(value % 1000 == 0 for value in values["H*1000"])


def test_run_abc_writes_plots_and_graphs(tmp_path):
    written = run_abc(tmp_path, 20)
    names = {path.name for path in written}
    for number in (1, 2, 3):
        assert f"plot_abc_{number}.png" in names
        assert f"graph_abc_{number}.dot" in names
    assert all(path.exists() for path in written)
    assert (tmp_path / "graph_abc_1.dot").read_text().startswith("digraph {")


def test_run_circadian_writes_files(tmp_path):
    written = run_circadian(tmp_path, 0.2)
    assert {path.name for path in written} == {
        "plot_circadian_rhythm.png",
        "graph_circadian_rhythm.dot",
    }
    dot = (tmp_path / "graph_circadian_rhythm.dot").read_text()
    assert "env [label" not in dot
    assert dot.rstrip().endswith("}")


def test_run_seihr_writes_files(tmp_path):
    written = run_seihr(tmp_path, 0.5)
    assert all(path.exists() for path in written)
    assert (tmp_path / "plot_seihr_covid19.png").stat().st_size > 0
    assert "S -> r0;" in (tmp_path / "graph_seihr_covid19.dot").read_text()


def test_peak_hospitalized_within_population():
    peak = peak_hospitalized(1000, 5)
    assert 0 <= peak <= 1000


def test_average_peak_within_bounds():
    average = average_peak(1000, 3, 5)
    assert 0.0 <= average <= 1000.0


def test_average_peak_rejects_non_positive_count():
    with pytest.raises(ValueError):
        average_peak(1000, 0, 5)


def test_main_abc_creates_files(tmp_path, capsys):
    code = main(["abc", "--output-dir", str(tmp_path), "--endtime", "5"])
    assert code == 0
    assert (tmp_path / "plot_abc_3.png").exists()
    assert "Finished!" in capsys.readouterr().out


def test_main_estimate_reports_peak(capsys):
    code = main(["estimate", "--population", "1000", "--endtime", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Max H (1000):" in out


def test_main_multiple_reports_average(capsys):
    code = main(["multiple", "--population", "1000", "--count", "2", "--endtime", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Running 2 simulations..." in out
    assert "AVERAGE PEAK-H:" in out


def test_main_requires_command():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2