"""The dining philosophers: many threads sharing a few exclusive forks."""

from __future__ import annotations

import argparse
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

FORK_COUNT = 4

SEATING = (
    ("Jürgen Habermas", 0, 1),
    ("Friedrich Engels", 1, 2),
    ("Karl Marx", 2, 3),
    ("Thomas Piketty", 3, 0),
    ("Michel Foucault", 0, 1),
    ("Socrates", 1, 2),
    ("Plato", 2, 3),
    ("Aristotle", 3, 0),
    ("Pythagoras", 0, 1),
    ("Heraclitus", 1, 2),
    ("Democritus", 2, 3),
    ("Diogenes", 3, 0),
    ("Epicurus", 0, 1),
    ("Zeno of Citium", 1, 2),
    ("Thales of Miletus", 2, 3),
)

Log = Callable[[str], object]


@dataclass(eq=False)
class Fork:
    """A fork that only one philosopher may hold at a time."""

    id: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


@dataclass(eq=False)
class Philosopher:
    """A philosopher seated between two forks."""

    id: int
    name: str
    left_fork: Fork
    right_fork: Fork

    def eat(self, eat_seconds: float = 1.0, log: Log = print) -> None:
        """Pick up both forks, eat for ``eat_seconds``, then put them down.

        Even-numbered philosophers reach for the left fork first, odd ones for
        the right, which breaks the symmetry that would cause a deadlock.
        """
        if eat_seconds < 0:
            raise ValueError(f"eating time must not be negative, got {eat_seconds}")
        if self.id % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork
        with first.lock:
            log(f"{self.name} picked up fork {first.id}.")
            with second.lock:
                log(f"{self.name} picked up fork {second.id}.")
                log(f"{self.name} is eating.")
                time.sleep(eat_seconds)
                log(f"{self.name} finished eating.")
                log(f"{self.name} put down fork {first.id}.")
                log(f"{self.name} put down fork {second.id}.")


def seat_philosophers(forks: Sequence[Fork]) -> list[Philosopher]:
    """Seat the fifteen philosophers at a table laid with ``forks``."""
    needed = max(max(left, right) for _, left, right in SEATING) + 1
    if len(forks) < needed:
        raise ValueError(f"the table needs {needed} forks, got {len(forks)}")
    return [
        Philosopher(index, name, forks[left], forks[right])
        for index, (name, left, right) in enumerate(SEATING)
    ]


def dine(fork_count: int = FORK_COUNT, eat_seconds: float = 1.0, log: Log = print) -> float:
    """Let every philosopher eat once, concurrently; return the seconds it took."""
    forks = [Fork(index) for index in range(fork_count)]
    philosophers = seat_philosophers(forks)
    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=len(philosophers)) as pool:
        futures = [pool.submit(p.eat, eat_seconds, log) for p in philosophers]
        for future in futures:
            future.result()
    return time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dinner and print how long it took."""
    parser = argparse.ArgumentParser(description="Dining philosophers simulation")
    parser.add_argument(
        "--seconds", type=float, default=1.0, help="How long each philosopher eats"
    )
    args = parser.parse_args(argv)
    if args.seconds < 0:
        parser.error("--seconds must not be negative")
    print("Dining Philosophers Problem:  15 Philosophers, 4 Forks...Yikes!!")
    elapsed = dine(FORK_COUNT, args.seconds)
    print(f"Total time: {elapsed:.6f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())