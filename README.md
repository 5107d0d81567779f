# philosophers

This package simulates the dining philosophers problem. The philosophers sit
at a round table. There is one fork between each pair of neighbours. Each
philosopher runs in its own thread and eats, sleeps and thinks in turn. An
observer thread watches for two things: a philosopher who has starved, or a
table where everyone has eaten enough.

## Installation

```
pip install .
```

## Usage

```
philosophers number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The arguments are:

- `number_of_philosophers`: from 1 to 1000.
- `time_to_die`: how many milliseconds a philosopher can go without eating before it dies.
- `time_to_eat`: how many milliseconds a meal lasts. The philosopher holds both forks during the meal.
- `time_to_sleep`: how many milliseconds the philosopher sleeps after a meal.
- `number_of_times_each_philosopher_must_eat` (optional): the simulation stops once every philosopher has eaten at least this many times.

Each value must be a positive whole number that fits in a signed 32-bit
integer. If the number of arguments is wrong or a value is invalid, the
command prints an error message and exits with status 1.

The command prints one line each time a philosopher's state changes:

```
<milliseconds since start> <philosopher id> <action>
```

The action is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. The simulation stops in two cases: a philosopher
dies, or every philosopher has eaten the required number of meals. Nothing is
printed after a death.

A lone philosopher has only one fork. It picks that fork up and cannot eat, so
it dies once `time_to_die` has passed.

Example:

```
philosophers 5 800 200 200 7
```

## Library use

You can also run the simulation from Python:

```python
import sys
from philosophers.config import parse_settings
from philosophers.cli import run_dinner

settings = parse_settings(["4", "410", "200", "200", "3"])
table = run_dinner(settings, sys.stdout)
print([philo.meal_count for philo in table.philosophers])
```

`parse_settings` takes the arguments that follow the command name. It returns
a `Settings` object and raises `InputError` if an argument is invalid.

`run_dinner` runs the simulation until it ends, writes the log to the stream
you pass in, and returns the final `Table`.

## Running the tests

```
pip install .[test]
pytest
```