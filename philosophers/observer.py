"""The watcher that detects starvation or a satisfied table."""

from __future__ import annotations

import time

from .table import DIED, Event, Table, current_time_ms

_IDLE_SECONDS = 0.0001


def check_round(table: Table) -> bool:
    """Inspect every philosopher once; return False when the dinner must end."""
    meals = table.settings.meals
    everyone_fed = True
    for philo in table.philosophers:
        with table.meal_lock:
            now = current_time_ms()
            if (
                philo.last_meal is not None
                and philo.last_meal < now
                and now - philo.last_meal >= table.settings.time_to_die
            ):
                table.broadcast(philo, DIED, Event.DEATH)
                return False
            if meals is not None and philo.meal_count < meals:
                everyone_fed = False
    if meals is not None and everyone_fed:
        table.broadcast(table.philosophers[0], None, Event.ENOUGH_MEALS)
        return False
    return True


def observe(table: Table) -> None:
    """Keep checking until someone dies or everyone has eaten enough."""
    while not table.stopped() and check_round(table):
        time.sleep(_IDLE_SECONDS)