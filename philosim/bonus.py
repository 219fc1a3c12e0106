"""Dining philosophers with the forks kept as one shared counting pool."""

from __future__ import annotations

import threading
from typing import List, Optional, TextIO

from philosim.config import Config
from philosim.simulation import Philosopher, Table
from philosim.timing import precise_sleep

SEMAPHORE_PREFIX = "/philo_philosopher"

_FORK_POLL_SECONDS = 0.001


def semaphore_name(ident: int) -> str:
    """Name of the per-philosopher data lock for philosopher ``ident``."""
    return f"{SEMAPHORE_PREFIX}{ident}"


class PooledPhilosopher(Philosopher):
    """A diner that takes any two forks from the table's shared pool."""

    def __init__(self, table: "PooledTable", ident: int) -> None:
        super().__init__(table, ident, None, None)
        self.semaphore_name = semaphore_name(ident)

    def _take_fork(self) -> bool:
        """Take one fork from the pool; False if the simulation stopped first."""
        self.table.log(self, "is thinking")
        while not self.table.forks.acquire(timeout=_FORK_POLL_SECONDS):
            if not self.table.is_running():
                return False
        self.table.log(self, "has taken a fork")
        return True

    def _eat(self) -> None:
        config = self._config
        if self.ident % 2 == 0:
            precise_sleep(config.time_to_eat // 2)
        if not self._take_fork():
            return
        if not self._take_fork():
            self.table.forks.release()
            return
        self.record_meal_start()
        self.table.log(self, "is eating")
        self.wait(config.time_to_eat)
        self.table.forks.release()
        self.table.forks.release()
        self.record_meal_end()

    def run(self) -> None:
        """Eat, sleep and think until the simulation stops."""
        config = self._config
        if config.number_philos == 1:
            self.table.log(self, "is thinking")
            self.wait(config.time_to_die)
            self.wait(config.time_to_eat)
            return
        if self.ident % 2 == 0:
            precise_sleep(config.time_to_eat // 2)
        while self.table.is_running():
            self._eat()
            self.table.log(self, "is sleeping")
            self.wait(config.time_to_sleep)


class PooledTable(Table):
    """A table whose forks are a single pool counted by a semaphore."""

    def __init__(self, config: Config, out: Optional[TextIO] = None) -> None:
        super().__init__(config, out)
        self.forks = threading.Semaphore(config.number_philos)
        self.philosophers: List[PooledPhilosopher] = [
            PooledPhilosopher(self, ident)
            for ident in range(1, config.number_philos + 1)
        ]

    def run(self) -> Optional[int]:
        """Run the simulation to its end; return the id of the dead philosopher."""
        return super().run()


def run_pooled_simulation(
    config: Config, out: Optional[TextIO] = None
) -> Optional[int]:
    """Run a pooled-fork simulation; return the id of the one who died, if any."""
    return PooledTable(config, out).run()