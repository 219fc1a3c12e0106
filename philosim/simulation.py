"""Dining philosophers simulated with one thread per philosopher and lock forks."""

from __future__ import annotations

import sys
import threading
from typing import List, Optional, TextIO

from philosim.config import Config
from philosim.timing import (
    MONITOR_INTERVAL_US,
    PHILOSOPHER_POLL_US,
    diff_ms,
    elapsed_ms,
    now,
    precise_sleep,
)


class Philosopher:
    """One diner holding references to the two forks beside it."""

    def __init__(
        self,
        table: "Table",
        ident: int,
        left_fork: threading.Lock,
        right_fork: Optional[threading.Lock],
    ) -> None:
        self.table = table
        self.ident = ident
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.meals = 0
        self.last_meal = table.start_time
        self.data_lock = threading.RLock()

    @property
    def _config(self) -> Config:
        return self.table.config

    def wait(self, milliseconds: int) -> None:
        """Wait ``milliseconds``, returning early once the simulation stops."""
        start = now()
        while diff_ms(start, now()) < milliseconds:
            precise_sleep(PHILOSOPHER_POLL_US)
            if not self.table.is_running():
                break

    def record_meal_start(self) -> None:
        """Mark the present moment as the start of the latest meal."""
        with self.data_lock:
            self.last_meal = now()

    def record_meal_end(self) -> None:
        """Count one more finished meal."""
        with self.data_lock:
            self.meals += 1

    def is_full(self) -> bool:
        """True once the required number of meals has been eaten."""
        target = self._config.number_of_meals
        with self.data_lock:
            return target is not None and self.meals >= target

    def is_starved(self) -> bool:
        """True if more than ``time_to_die`` ms have passed since the last meal."""
        with self.data_lock:
            return diff_ms(self.last_meal, now()) > self._config.time_to_die

    def _think_until_fork(self, fork: threading.Lock) -> None:
        self.table.log(self, "is thinking")
        fork.acquire()
        self.table.log(self, "has taken a fork")

    def _eat(self) -> None:
        if self.right_fork is None:
            self.table.log(self, "is thinking")
            self.wait(self._config.time_to_die)
            self.wait(self._config.time_to_die)
            return
        if self.ident % 2 == 0:
            first, second = self.right_fork, self.left_fork
        else:
            first, second = self.left_fork, self.right_fork
        self._think_until_fork(first)
        self._think_until_fork(second)
        self.record_meal_start()
        self.table.log(self, "is eating")
        self.wait(self._config.time_to_eat)
        self.left_fork.release()
        self.right_fork.release()
        self.record_meal_end()

    def _sleep(self) -> None:
        self.table.log(self, "is sleeping")
        self.wait(self._config.time_to_sleep)

    def run(self) -> None:
        """Eat, sleep and think until the simulation stops."""
        # Even philosophers start late so neighbours do not grab forks at once.
        stagger = self._config.time_to_eat // 2
        is_even = self.ident % 2 == 0
        if is_even:
            precise_sleep(stagger)
        while True:
            if is_even:
                precise_sleep(stagger)
            if not self.table.is_running():
                break
            self._eat()
            self._sleep()


class Table:
    """The shared state of one simulation: forks, diners and the monitor."""

    def __init__(self, config: Config, out: Optional[TextIO] = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self._running = True
        self._running_lock = threading.Lock()
        self._write_lock = threading.Lock()
        self.dead: Optional[int] = None
        self.start_time = now()
        count = config.number_philos
        self.forks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self.philosophers: List[Philosopher] = [
            Philosopher(
                self,
                index + 1,
                fork,
                None if count == 1 else self.forks[(index + 1) % count],
            )
            for index, fork in enumerate(self.forks)
        ]

    def is_running(self) -> bool:
        """True until a death or until every philosopher is full."""
        with self._running_lock:
            return self._running

    def stop(self) -> None:
        """End the simulation; no further messages are written."""
        with self._running_lock:
            self._running = False

    def _write(self, ident: int, message: str) -> None:
        with self._write_lock:
            self.out.write(f"{elapsed_ms(self.start_time)} {ident} {message}\n")
            self.out.flush()

    def log(self, philosopher: Philosopher, message: str) -> None:
        """Write a timestamped status line unless the simulation has stopped."""
        with self._running_lock:
            if self._running:
                self._write(philosopher.ident, message)

    def _announce_death(self, philosopher: Philosopher) -> None:
        with self._running_lock:
            self._running = False
            self.dead = philosopher.ident
            self._write(philosopher.ident, "died")

    def check_philosophers(self) -> bool:
        """Report a death or return True when the simulation should end."""
        all_full = True
        for philosopher in self.philosophers:
            with philosopher.data_lock:
                if not philosopher.is_full():
                    all_full = False
                if philosopher.is_starved():
                    self._announce_death(philosopher)
                    return True
        return all_full

    def monitor(self) -> None:
        """Poll the philosophers until someone dies or everyone is full."""
        while True:
            precise_sleep(MONITOR_INTERVAL_US)
            if not self.is_running():
                return
            if self.check_philosophers():
                self.stop()
                return

    def run(self) -> Optional[int]:
        """Run the simulation to its end; return the id of the dead philosopher."""
        self.start_time = now()
        for philosopher in self.philosophers:
            philosopher.last_meal = self.start_time
        monitor = threading.Thread(target=self.monitor, name="monitor")
        monitor.start()
        threads = [
            threading.Thread(target=p.run, name=f"philosopher-{p.ident}")
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        monitor.join()
        for thread in threads:
            thread.join()
        return self.dead


def run_simulation(config: Config, out: Optional[TextIO] = None) -> Optional[int]:
    """Run a simulation for ``config``; return the id of the one who died, if any."""
    return Table(config, out).run()