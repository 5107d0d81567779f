"""What each philosopher does: take forks, eat, sleep and think."""

from __future__ import annotations

from .table import (
    EATING,
    SLEEPING,
    TAKEN_FORK,
    THINKING,
    Event,
    HeldForks,
    Philosopher,
    Table,
    current_time_ms,
)

_OPENING_PAUSE_MS = 60
_THINK_MARGIN_MS = 10
_LONE_WAIT_EXTRA_MS = 200


def opening_moves(table: Table, philo: Philosopher) -> None:
    """Stagger the first round so neighbours do not all grab forks at once."""
    amount = table.settings.amount
    if amount % 2 == 1 and amount != 1 and philo.id % 2:
        think(table, philo)
    if amount % 2 == 0 and philo.id % 2:
        think(table, philo)
        table.rest(philo, _OPENING_PAUSE_MS)


def _pick_forks(table: Table, philo: Philosopher, forks: HeldForks) -> bool:
    forks.take_first()
    if not table.broadcast(philo, TAKEN_FORK, Event.MESSAGE, forks):
        return False
    if table.settings.amount == 1:
        # A lone philosopher can never get a second fork; wait to starve.
        table.rest(philo, table.settings.time_to_die + _LONE_WAIT_EXTRA_MS, forks)
        forks.release()
        return False
    forks.take_second()
    return True


def eat(table: Table, philo: Philosopher) -> bool:
    """Take both forks and eat; return False once the dinner is over."""
    forks = HeldForks(philo)
    if not _pick_forks(table, philo, forks):
        return False
    with table.meal_lock:
        philo.last_meal = current_time_ms()
        if not table.broadcast(philo, TAKEN_FORK, Event.MESSAGE, forks):
            return False
        if not table.broadcast(philo, EATING, Event.MESSAGE, forks):
            return False
    if not table.rest(philo, table.settings.time_to_eat, forks):
        return False
    with table.meal_lock:
        philo.meal_count += 1
    forks.release()
    return True


def sleep(table: Table, philo: Philosopher) -> bool:
    """Sleep for the configured time; return False once the dinner is over."""
    if not table.broadcast(philo, SLEEPING):
        return False
    return table.rest(philo, table.settings.time_to_sleep)


def think(table: Table, philo: Philosopher) -> bool:
    """Think; with an odd number of diners, wait long enough to stay fair."""
    if not table.broadcast(philo, THINKING):
        return False
    if table.settings.amount % 2 == 0:
        return True
    pause = max(
        table.settings.time_to_eat - table.settings.time_to_sleep + _THINK_MARGIN_MS,
        0,
    )
    return table.rest(philo, pause)


def philosopher_routine(table: Table, philo: Philosopher) -> None:
    """Body of a philosopher thread: wait for the start, then loop until stopped."""
    table.wait_for_open()
    philo.start = current_time_ms()
    with table.meal_lock:
        philo.last_meal = philo.start
    opening_moves(table, philo)
    while not table.stopped():
        if not eat(table, philo):
            return
        if not sleep(table, philo):
            return
        if not think(table, philo):
            return