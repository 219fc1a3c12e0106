# philosim

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread: it thinks, picks up forks, eats and sleeps. A monitor thread
checks on them every 9 ms and stops the table when one of them has gone
longer than `time_to_die` milliseconds without starting a meal, or when every
philosopher has eaten the required number of meals.

Every event is written as one line of the form

```
<milliseconds since start> <philosopher id> <action>
```

where the action is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. Once the simulation has stopped, nothing more is
written.

## Installation

```
pip install .
```

## Usage

```
philo <number_of_philos> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_meals]
```

- `number_of_philos`: between 1 and 200
- `time_to_die`, `time_to_eat`, `time_to_sleep`: milliseconds, each at least 60
- `number_of_meals` (optional): stop once every philosopher has eaten this
  many times; without it the simulation runs until a philosopher dies

Example, four philosophers that keep going until each has eaten seven times:

```
philo 4 410 200 200 7
```

Example where the lone philosopher has only one fork and dies:

```
philo 1 800 200 200
```

In `philo` every fork lies between two neighbours. `philo-bonus` takes the
same arguments but places all forks in the middle of the table as one shared
pool, from which a philosopher takes any two:

```
philo-bonus 5 800 200 200
```

Invalid arguments print an error message (or the usage line when the number
of arguments is wrong) and the command exits with status 1.

## Library use

```python
import sys

from philosim.config import Config, parse_args
from philosim.simulation import run_simulation
from philosim.bonus import run_pooled_simulation

config = parse_args(["4", "410", "200", "200", "3"])
dead = run_simulation(config, sys.stdout)
dead = run_pooled_simulation(Config(5, 800, 200, 200), sys.stdout)
```

`parse_args` takes the arguments that follow the program name and raises
`philosim.config.ConfigError` when they are invalid; building a `Config`
directly applies the same range checks. Both run functions return the id of
the philosopher who died, or `None` if everyone ate their fill. The `out`
argument defaults to standard output.

`philosim.simulation.Table` and `philosim.bonus.PooledTable` give access to
the table itself, its philosophers and its monitor. `philosim.numparse` holds
the integer validation and parsing the arguments go through, and
`philosim.timing` the microsecond clock helpers.

## Running the tests

```
pip install ".[test]"
pytest
```