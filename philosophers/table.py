"""Shared state of the dinner: forks, locks, stop flag and the message log."""

from __future__ import annotations

import enum
import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .config import Settings

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"

_POLL_SECONDS = 0.0003


def current_time_ms() -> int:
    """Return a monotonic clock reading in milliseconds."""
    return time.monotonic_ns() // 1_000_000


class Event(enum.Enum):
    """What a broadcast means for the simulation."""

    MESSAGE = 0
    DEATH = 1
    ENOUGH_MEALS = 2


def assign_forks(amount: int, index: int) -> tuple[int, int | None]:
    """Return the indices of the first and second fork of philosopher ``index``.

    Odd-numbered philosophers reach for their right fork first, even-numbered
    ones for their left, so neighbours never wait on each other in a cycle.
    """
    if amount == 1:
        return index, None
    right = (index + 1) % amount
    if (index + 1) % 2:
        return right, index
    return index, right


@dataclass(eq=False)
class Philosopher:
    """One diner and the forks it uses."""

    id: int
    first_fork: threading.Lock
    second_fork: threading.Lock | None
    start: int | None = None
    last_meal: int | None = None
    meal_count: int = 0


@dataclass
class HeldForks:
    """Tracks which forks a philosopher currently holds."""

    philo: Philosopher
    first: bool = False
    second: bool = False

    def take_first(self) -> None:
        self.philo.first_fork.acquire()
        self.first = True

    def take_second(self) -> None:
        if self.philo.second_fork is None:
            raise RuntimeError(f"philosopher {self.philo.id} has no second fork")
        self.philo.second_fork.acquire()
        self.second = True

    def release(self) -> None:
        """Put down every fork still held."""
        if self.first:
            self.philo.first_fork.release()
            self.first = False
        if self.second and self.philo.second_fork is not None:
            self.philo.second_fork.release()
            self.second = False


class Table:
    """Forks, philosophers and the synchronisation shared by all threads."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.forks = [threading.Lock() for _ in range(settings.amount)]
        self.philosophers: list[Philosopher] = []
        for index in range(settings.amount):
            first, second = assign_forks(settings.amount, index)
            self.philosophers.append(
                Philosopher(
                    id=index + 1,
                    first_fork=self.forks[first],
                    second_fork=None if second is None else self.forks[second],
                )
            )
        self.meal_lock = threading.Lock()
        self._msg_lock = threading.Lock()
        self._death_lock = threading.Lock()
        self._stop = False
        self._opened = threading.Event()

    def open(self) -> None:
        """Let every waiting philosopher start."""
        self._opened.set()

    def wait_for_open(self) -> None:
        self._opened.wait()

    def stopped(self) -> bool:
        with self._death_lock:
            return self._stop

    def stop(self) -> None:
        with self._death_lock:
            self._stop = True

    def broadcast(
        self,
        philo: Philosopher,
        message: str | None,
        event: Event = Event.MESSAGE,
        forks: HeldForks | None = None,
    ) -> bool:
        """Log ``message`` for ``philo``; return False once the dinner is over.

        A death is logged and ends the dinner; reaching the meal goal ends it
        silently. Whenever False is returned the given forks are put down.
        """
        with self._msg_lock:
            if self.stopped():
                if forks is not None:
                    forks.release()
                return False
            if event is not Event.ENOUGH_MEALS:
                now = current_time_ms()
                start = philo.start if philo.start is not None else now
                self.out.write(f"{now - start} {philo.id} {message}\n")
                self.out.flush()
            if event in (Event.DEATH, Event.ENOUGH_MEALS):
                self.stop()
                if forks is not None:
                    forks.release()
                return False
        return True

    def rest(
        self,
        philo: Philosopher,
        duration_ms: int,
        forks: HeldForks | None = None,
    ) -> bool:
        """Wait ``duration_ms``; return False early if the dinner stops."""
        start = current_time_ms()
        while current_time_ms() - start < duration_ms:
            if self.stopped():
                if forks is not None:
                    forks.release()
                return False
            time.sleep(_POLL_SECONDS)
        return True