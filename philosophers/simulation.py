"""The dining philosophers: a round table of threads sharing forks."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .validation import check_params, parse_int

_DEATH_MARGIN_MS = 5
_TICK_SECONDS = 0.001


def current_millis() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: int | None = None


def settings_from_args(args: Sequence[str]) -> Settings:
    """Build settings from command-line arguments (without the program name)."""
    if len(args) not in (4, 5):
        raise ValueError(f"expected 4 or 5 arguments, got {len(args)}")
    if not check_params(args):
        raise ValueError("arguments must be positive whole numbers")
    count, die, eat, sleep = (parse_int(arg) for arg in args[:4])
    max_meals = parse_int(args[4]) if len(args) == 5 else None
    return Settings(count, die, eat, sleep, max_meals)


class Table:
    """The shared state: the ring of philosophers, the output and the death flag."""

    def __init__(
        self,
        settings: Settings,
        output: TextIO | None = None,
        start_time: int | None = None,
    ) -> None:
        self.settings = settings
        self.output = output if output is not None else sys.stdout
        self.start_time = current_millis() if start_time is None else start_time
        self._print_lock = threading.Lock()
        self._dead_lock = threading.Lock()
        self._dead = False
        self.philosophers = [
            Philosopher(self, ident) for ident in range(1, settings.count + 1)
        ]
        for left, right in zip(self.philosophers, self.philosophers[1:] + self.philosophers[:1]):
            left.next = right
            right.previous = left

    @property
    def dead(self) -> bool:
        """Whether a death has been recorded."""
        with self._dead_lock:
            return self._dead

    def report(self, philosopher: Philosopher, message: str | None) -> None:
        """Print a timestamped state change; ``None`` announces a death.

        Ordinary messages are dropped once a death has been recorded.
        """
        with self._print_lock:
            if self._dead and message is not None:
                return
            timestamp = current_millis() - self.start_time
            text = "died" if message is None else message
            self.output.write(f"{timestamp} {philosopher.ident} {text}\n")
            self.output.flush()

    def run(self) -> None:
        """Start one thread per philosopher and wait for all of them."""
        threads = [
            threading.Thread(target=philosopher.run, name=f"philosopher-{philosopher.ident}")
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()


class Philosopher:
    """One seat at the table, owning the fork on its side."""

    def __init__(self, table: Table, ident: int) -> None:
        self.table = table
        self.ident = ident
        self.fork = threading.Lock()
        self.next: Philosopher = self
        self.previous: Philosopher = self
        self.ate = 0
        self.last_meal = table.start_time
        self._held: list[threading.Lock] = []

    def __repr__(self) -> str:
        return f"Philosopher({self.ident}, ate={self.ate})"

    def check_death(self) -> bool:
        """Return True if anyone has died, recording this philosopher's death if due."""
        table = self.table
        with table._dead_lock:
            dead = table._dead
            elapsed = current_millis() - self.last_meal
        if not dead and elapsed >= table.settings.time_to_die + _DEATH_MARGIN_MS:
            with table._dead_lock:
                table._dead = True
            table.report(self, None)
            dead = True
        return dead

    def _prefers_far_fork(self) -> bool:
        return self.ident == 1 and self.ate > self.previous.ate

    def _second_fork(self) -> threading.Lock:
        count = self.table.settings.count
        if count % 2 != 0:
            judge = self.next if self.ident == count else self
            if judge._prefers_far_fork():
                return self.next.next.fork
        return self.next.fork

    def _take(self, fork: threading.Lock) -> bool:
        if self.check_death():
            return False
        while not fork.acquire(timeout=_TICK_SECONDS):
            if self.check_death():
                return False
        if self.check_death():
            fork.release()
            return False
        self._held.append(fork)
        self.table.report(self, "has taken a fork")
        return True

    def take_forks(self) -> bool:
        """Pick up two forks; return True if both are held."""
        if self.next is self:
            time.sleep(self.table.settings.time_to_die / 1000)
            self.table.report(self, "died")
            return False
        second = self._second_fork()
        if not self._take(self.fork):
            return False
        if not self._take(second):
            self.release_forks()
            return False
        return True

    def release_forks(self) -> None:
        """Put down every fork this philosopher holds."""
        while self._held:
            self._held.pop().release()

    def _wait_until(self, end: int) -> bool:
        while current_millis() < end:
            if self.check_death():
                return False
            time.sleep(_TICK_SECONDS)
        return True

    def eat(self) -> bool:
        """Eat for the configured time; return False if the meal was cut short by a death."""
        start = current_millis()
        end = start + self.table.settings.time_to_eat
        self.ate += 1
        self.last_meal = start
        if self.check_death():
            return False
        self.table.report(self, "is eating")
        if not self._wait_until(end):
            self.release_forks()
            return False
        return True

    def sleep(self) -> bool:
        """Sleep for the configured time; return False if a death interrupted it."""
        end = current_millis() + self.table.settings.time_to_sleep
        if self.check_death():
            return False
        self.table.report(self, "is sleeping")
        return self._wait_until(end)

    def think(self) -> bool:
        """Announce thinking; return False if someone has died."""
        if self.check_death():
            return False
        self.table.report(self, "is thinking")
        return True

    def run(self) -> None:
        """The life of one philosopher: eat, sleep and think until done or dead."""
        max_meals = self.table.settings.max_meals
        self.think()
        if self.ident % 2 != 0:
            time.sleep(_TICK_SECONDS)
        while not self.check_death():
            if self.take_forks():
                finished = self.eat()
                self.release_forks()
                if not finished:
                    break
            if max_meals is not None and self.ate >= max_meals:
                break
            if not self.sleep():
                break
            if not self.think():
                break


def simulate(settings: Settings, output: TextIO | None = None) -> Table:
    """Run a whole simulation and return the table it ran on."""
    table = Table(settings, output)
    table.run()
    return table