import io

import pytest

from stochsim.reaction import Reactant
from stochsim.symbol_table import SymbolTable
from stochsim.utils import export_to_dot, plot_time_series, print_vessel_state
from stochsim.vessel import Vessel


def abc_vessel(a, b, c):
    v = Vessel()
    A = v.add("A", a)
    B = v.add("B", b)
    C = v.add("C", c)
    v.add_rule(A + C >> 0.001 >> B + C)
    return v


def test_generates_plot_on_valid_input(tmp_path):
    target = tmp_path / "test_plot.png"
    plot_time_series(
        "Test Plot", str(target), [0.0, 1.0, 2.0, 3.0], {"A": [1, 2, 3, 4], "B": [4, 3, 2, 1]}
    )
    assert target.exists()
    assert target.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_mismatched_lengths_raise(tmp_path):
    with pytest.raises(ValueError, match="does not match"):
        plot_time_series("Mismatch", str(tmp_path / "fail.png"), [0.0, 1.0, 2.0], {"A": [1, 2]})
    assert not (tmp_path / "fail.png").exists()


def test_empty_input_raises(tmp_path):
    with pytest.raises(ValueError, match="Empty"):
        plot_time_series("Empty", str(tmp_path / "empty.png"), [], {})


def test_empty_values_raise(tmp_path):
    with pytest.raises(ValueError):
        plot_time_series("Empty", str(tmp_path / "empty.png"), [0.0], {})


def test_export_to_dot_abc():
    out = io.StringIO()
    export_to_dot(out, abc_vessel(1, 2, 3))
    output = out.getvalue()
    assert "digraph {" in output
    assert 'A [label="A"' in output
    assert 'B [label="B"' in output
    assert 'C [label="C"' in output
    assert "A -> r0;" in output
    assert "C -> r0;" in output
    assert "r0 -> B;" in output
    assert "r0 -> C;" in output
    assert 'r0 [label="0.001"' in output
    assert "}" in output


def test_export_to_dot_skips_internal_symbols():
    v = Vessel()
    env = v.add("env", 0, True)
    a = v.add("A", 5)
    v.add_rule(a >> 2 >> env)
    out = io.StringIO()
    export_to_dot(out, v)
    output = out.getvalue()
    assert "env [label" not in output
    assert "-> env" not in output
    assert "A -> r0;" in output
    assert output.endswith("}\n")


def test_export_to_dot_exact_layout():
    v = Vessel()
    a = v.add("A", 1)
    b = v.add("B", 0)
    v.add_rule(a >> 0.25 >> b)
    out = io.StringIO()
    export_to_dot(out, v)
    assert out.getvalue() == (
        "digraph {\n"
        ' A [label="A", shape=box, style=filled, fillcolor=cyan];\n'
        ' B [label="B", shape=box, style=filled, fillcolor=cyan];\n'
        ' r0 [label="0.25", shape=oval, style=filled, fillcolor=yellow];\n'
        " A -> r0;\n"
        " r0 -> B;\n"
        "}\n"
    )


def test_print_vessel_state(capsys):
    table = SymbolTable()
    table.add("B", 2, False)
    table.add("A", 1, True)
    print_vessel_state(table)
    assert capsys.readouterr().out == "Vessel state of symbols:\n  A: 1\n  B: 2\n"


def test_export_unknown_input_still_listed():
    v = Vessel()
    a = v.add("A", 1)
    v.add_rule(a + Reactant("X", 0) >> 1 >> a)
    out = io.StringIO()
    export_to_dot(out, v)
    assert "X -> r0;" in out.getvalue()