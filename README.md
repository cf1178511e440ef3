# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and sits at a round table. Each philosopher owns one fork,
and a philosopher needs two forks to eat. After eating it sleeps, and then
it thinks. The simulation stops when a philosopher starves, or when every
philosopher has eaten the requested number of times.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same can be run as `python -m philosophers.cli ...`.

All times are in milliseconds. Every argument must consist of ASCII digits
only and must not be `0`. If there are not four or five arguments, or any
of them is not valid, the command prints a usage line instead. The exit
status is 0 in every case.

Example:

```
philo 5 800 200 200 7
```

Every change of state is printed on its own line, as the number of
milliseconds since the start, the philosopher's number (from 1) and one of:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

A philosopher is declared dead once more than its `time_to_die` (plus a
margin of 5 ms) has passed since the start of its last meal. After a death
is recorded no further state changes are printed. A lone philosopher has
only one fork: it waits `time_to_die` milliseconds and then dies.

## Library use

```python
import sys

from philosophers.simulation import settings_from_args, simulate

settings = settings_from_args(["4", "410", "200", "200", "3"])
table = simulate(settings, sys.stdout)
print(table.dead)
```

- `philosophers.simulation.Settings` holds the parameters: `count`,
  `time_to_die`, `time_to_eat`, `time_to_sleep` and `max_meals`
  (`None` for no limit).
- `settings_from_args` builds `Settings` from argument strings and raises
  `ValueError` when they are not valid.
- `simulate(settings, output)` runs the simulation to the end, writing to
  `output` (standard output by default), and returns the `Table`.
- `Table` holds the ring of `Philosopher` objects in `philosophers`; its
  `run()` starts one thread per philosopher and joins them, and its `dead`
  property tells whether a death was recorded. Each `Philosopher` keeps its
  number in `ident` and its meal count in `ate`.
- `philosophers.validation.check_params` checks a list of argument strings,
  and `philosophers.validation.parse_int` reads a leading integer the way
  C's `atoi` does, wrapping like a 32-bit signed integer.

## Running the tests

```
pip install .[test]
pytest
```