import io

from philosim.bonus import (
    PooledPhilosopher,
    PooledTable,
    run_pooled_simulation,
    semaphore_name,
)
from philosim.config import Config


def _lines(buffer):
    return buffer.getvalue().splitlines()


def _timestamps(lines):
    return [int(line.split()[0]) for line in lines]


def test_semaphore_name_uses_prefix():
    assert semaphore_name(1) == "/philo_philosopher1"
    assert semaphore_name(42).startswith("/philo_philosopher")
    assert semaphore_name(42).endswith("42")


def test_semaphore_names_distinct():
    table = PooledTable(Config(5, 800, 200, 200))
    names = [p.semaphore_name for p in table.philosophers]
    assert len(set(names)) == 5
    assert [p.ident for p in table.philosophers] == [1, 2, 3, 4, 5]
    assert all(isinstance(p, PooledPhilosopher) for p in table.philosophers)


def test_single_philosopher_dies():
    out = io.StringIO()
    config = Config(1, 200, 100, 100)
    dead = run_pooled_simulation(config, out)
    lines = _lines(out)
    assert dead == 1
    assert lines[0].split()[1:] == ["1", "is", "thinking"]
    assert lines[-1].split()[1:] == ["1", "died"]
    assert _timestamps(lines)[-1] >= config.time_to_die


def test_all_full_ends_without_death():
    out = io.StringIO()
    config = Config(4, 1000, 60, 60, 2)
    dead = run_pooled_simulation(config, out)
    lines = _lines(out)
    assert dead is None
    assert not any(line.endswith("died") for line in lines)
    for ident in range(1, 5):
        eats = [ln for ln in lines if ln.split()[1:] == [str(ident), "is", "eating"]]
        assert len(eats) >= config.number_of_meals


def test_timestamps_non_decreasing():
    out = io.StringIO()
    run_pooled_simulation(Config(3, 1000, 60, 60, 1), out)
    stamps = _timestamps(_lines(out))
    assert stamps == sorted(stamps)


def test_death_is_last_line():
    out = io.StringIO()
    dead = run_pooled_simulation(Config(3, 60, 200, 60), out)
    lines = _lines(out)
    assert dead in (1, 2, 3)
    assert lines[-1].split()[1:] == [str(dead), "died"]
    assert sum(line.endswith("died") for line in lines) == 1


def test_meal_count_recorded():
    table = PooledTable(Config(2, 1000, 60, 60, 1), io.StringIO())
    assert table.run() is None
    assert all(p.meals >= 1 for p in table.philosophers)
    assert all(p.is_full() for p in table.philosophers)