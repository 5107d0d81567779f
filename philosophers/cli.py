"""Command-line entry point that runs one dinner."""

from __future__ import annotations

import sys
import threading
from typing import Sequence, TextIO

from .config import InputError, Settings, parse_settings
from .observer import observe
from .philosopher import philosopher_routine
from .table import Table

THREAD_FAILURE = "Insufficient resources to create another thread."


def run_dinner(settings: Settings, out: TextIO | None = None) -> Table:
    """Run the simulation to its end and return the final table state."""
    table = Table(settings, out)
    threads: list[threading.Thread] = []

    def abort() -> None:
        table.stop()
        table.open()
        for started in threads:
            started.join()

    try:
        for philo in table.philosophers:
            thread = threading.Thread(
                target=philosopher_routine,
                args=(table, philo),
                name=f"philosopher-{philo.id}",
            )
            thread.start()
            threads.append(thread)
        watcher = threading.Thread(target=observe, args=(table,), name="observer")
        watcher.start()
    except RuntimeError:
        abort()
        raise
    table.open()
    watcher.join()
    for thread in threads:
        thread.join()
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments, run the dinner and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except InputError as error:
        print(error)
        return 1
    try:
        run_dinner(settings)
    except RuntimeError:
        print(THREAD_FAILURE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())