# philodine

A simulation of the dining philosophers problem that runs on threads.

Philosophers sit around a table with one fork between each pair of neighbours. A philosopher needs both neighbouring forks to eat. Each one repeats a cycle: think, take the forks, eat, sleep. A supervisor watches the table. If a philosopher goes longer than the allowed time without starting a meal, the supervisor announces the death and the simulation stops. When a meal count is given, the simulation also ends once every philosopher has eaten that many meals.

## Installation

```
pip install .
```

## Usage

```
philodine NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS_REQUIRED]
```

All times are in milliseconds.

- `NUMBER_OF_PHILOSOPHERS`: how many philosophers sit at the table. This is also the number of forks.
- `TIME_TO_DIE`: how long a philosopher may go between meals. The clock starts at the beginning of the simulation and restarts when a meal ends.
- `TIME_TO_EAT`: how long a meal takes.
- `TIME_TO_SLEEP`: how long a philosopher sleeps after eating.
- `MEALS_REQUIRED` (optional): a philosopher stops after eating this many meals. If it is left out, the simulation runs until someone dies.

Each argument must be a non-negative whole number. Leading whitespace, one leading `+` and leading zeros are allowed. After the leading zeros are removed, at most seven digits may remain. With the wrong number of arguments, or with an argument that is not valid, the command prints a message to standard error and exits with status 1. Otherwise it exits with status 0.

Example:

```
philodine 5 800 200 200 7
```

Every event goes to standard output as one line. The line holds the number of milliseconds since the common start, the philosopher's number (counting from 1), and what happened:

```
0 1 is thinking
0 2 is thinking
1 2 is eating
201 2 is sleeping
```

Once a line such as `812 3 died` has been printed, nothing further is printed. A lone philosopher has only one fork. That philosopher picks it up, can never eat, and dies when the time runs out.

## Library use

```python
import sys

from philodine.args import parse_args
from philodine.simulation import run_simulation

settings = parse_args(["5", "800", "200", "200", "3"])
dead = run_simulation(settings, sys.stdout)  # id of the philosopher who died, or None
```

- `philodine.args.parse_number(text)` checks one argument and returns its value.
- `philodine.args.parse_args(argv)` takes four or five arguments, without the program name, and returns a frozen `Settings` dataclass. `Settings` has the fields `philosophers`, `time_to_die`, `time_to_eat`, `time_to_sleep` and `meals_required`; `meals_required` is `None` when no count was given.
- Both parsing functions raise `ArgumentError`, a subclass of `ValueError`, when the input is bad.
- `philodine.simulation.Simulation(settings, out)` holds the forks and the `Philosopher` objects. Its `run()` method returns the id of the philosopher who died, or `None`. `declare_death(philosopher)` announces a death and stops the simulation.
- `philodine.timing.now_ms()` returns the wall-clock time in milliseconds. `wait_until(start_time)` blocks until that time.
- `philodine.cli.main(argv=None)` is the command's entry point. It returns the exit status.

## Limitations

Without `MEALS_REQUIRED`, the simulation ends only when a philosopher dies. If the timings let everyone keep eating, it runs until it is interrupted. Output is plain text only.

## Running the tests

```
pip install .[test]
pytest
```