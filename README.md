# stochsim

stochsim simulates reaction networks stochastically. You write reaction rules
with Python operators and collect them in a `Vessel`. A `Simulator` then runs
them. At each step it draws an exponential delay for every rule, fires the rule
with the shortest delay, and moves time forward by that delay. This is the
first-reaction method.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Writing a model

```python
from stochsim.vessel import Vessel

v = Vessel()
A = v.add("A", 100)
B = v.add("B", 0)
C = v.add("C", 1)
v.add_rule(A + C >> 0.001 >> B + C)

for rule in v.rules:
    print(rule)          # A + C >> 0.001 >>= B + C
```

### Species

`Vessel.add(name, initial_value, is_internal=False)` registers a species and
returns a `Reactant`.

A species marked internal is still simulated. It is left out of the dot graph
and of the series that the command line collects.

`Vessel.symbols` is the `SymbolTable` of initial counts.

### Rules

A rule is written as `inputs >> rate >> outputs`. You join reactants with `+`
to form a `Combination`. The result is a `ReactionRule`, and `str()` on it
gives the human-readable form.

`Vessel.add_rule(rule)` appends a rule. `Vessel.rules` returns the rules in the
order they were added.

### Symbol table

`stochsim.symbol_table.SymbolTable` stores its keys in sorted order. It offers:

- `add(key, value, is_internal=False)`
- indexing, to read and write values
- `in`
- `len()`
- `keys(exclude_internal=False)`
- `is_internal(key)`
- `copy()`

Two mistakes raise errors:

- Adding a key that already exists raises `DuplicateSymbolError`.
- Reading or assigning a missing key raises `UnknownSymbolError`.

Both are subclasses of `LookupError`.

## Simulating

```python
from stochsim.simulator import Simulator

sim = Simulator(v, seed=42)   # seed is optional

peak = 0
def observer(time, state):
    global peak
    peak = max(peak, state["B"])

sim.simulate(2000, observer)
```

The simulator offers three ways to run:

- **`Simulator.simulate(endtime, observer)`** calls the observer once at time 0. It calls it again after every reaction, until time passes `endtime` or no rule can fire.
- **`Simulator.trajectory(endtime)`** yields the same `(time, state)` pairs lazily. The same state table is yielded each time, so copy it if you need a snapshot.
- **`Simulator.simulate_multiple(sim_count, endtime, observer)`** runs independent simulations concurrently in a thread pool. It calls `observer(index, time, state)`, where `index` tells the runs apart. An exception raised in any run is passed on to the caller.

Each run starts from a fresh copy of the vessel's initial counts. If you give a
seed, the sequence of runs is reproducible.

## Ready-made models

`stochsim.models` provides three vessels:

- `abc(a, b, c)`: `A + C >> 0.001 >> B + C`
- `circadian_rhythm()`: a genetic oscillator model of the circadian clock
- `seihr(n)`: an SEIHR epidemic model for a population of `n`

## Output

`stochsim.utils` has three output helpers:

- **`plot_time_series(title, file_name, times, values)`** plots each series against time with matplotlib and saves the figure to a file. It raises `ValueError` in two cases: when the input is empty, or when a series differs in length from `times`.
- **`export_to_dot(stream, vessel)`** writes the network as a Graphviz digraph. Species appear as boxes and rules as ovals labelled with their rate.
- **`print_vessel_state(symbols)`** prints every symbol and its value.

## Command line

```
stochsim --help
```

The `stochsim` command has five subcommands.

| Subcommand | What it does | Files written | Default end time |
| --- | --- | --- | --- |
| `stochsim abc [--output-dir DIR] [--endtime T]` | Simulates three A/B/C set-ups: (100, 0, 1), (100, 0, 2) and (50, 50, 1) | `plot_abc_N.png` and `graph_abc_N.dot` for each set-up | 2000 |
| `stochsim circadian [--output-dir DIR] [--endtime T]` | Simulates the circadian model | `plot_circadian_rhythm.png` and `graph_circadian_rhythm.dot` | 48 |
| `stochsim seihr [--output-dir DIR] [--endtime T]` | Simulates SEIHR for 10000 people; the hospitalised count is plotted times 1000 | `plot_seihr_covid19.png` and `graph_seihr_covid19.dot` | 100 |
| `stochsim estimate [--population N ...] [--endtime T]` | Prints the peak hospitalised count of one SEIHR run per population; the option can be repeated, and the default populations are 589755 and 5822763 | none | 100 |
| `stochsim multiple [--population N] [--count K] [--endtime T]` | Prints the average hospitalised peak over `K` concurrent runs; defaults are 10000 people and 100 runs | none | 100 |

For `estimate`, only the running maximum is kept, not the whole trajectory.

The functions behind these subcommands are in `stochsim.cli`:

- `run_abc`
- `run_circadian`
- `run_seihr`
- `peak_hospitalized`
- `average_peak`
- `collect_series`

## What it does not do

Plots are only written to image files. Dot graphs are written as text. The
package does not display plots on screen and does not render dot files to
images.