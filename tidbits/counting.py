"""Small demonstrations with counters, constant sums and the collections on offer."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence

VALUES = (1, 2, 3)
SAMPLE_NUMBERS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1, 3)


def count_frequencies(numbers: Iterable[Hashable]) -> list[tuple[Hashable, int]]:
    """Return ``(value, occurrences)`` pairs in order of first appearance."""
    return list(Counter(numbers).items())


def add() -> int:
    """Return the sum of the fixed values."""
    return sum(VALUES)


def collections_overview() -> list[tuple[str, list[str]]]:
    """Return the common collection types grouped by kind."""
    return [
        ("Sequences", ["list", "tuple", "collections.deque"]),
        ("Maps", ["dict", "collections.OrderedDict", "collections.defaultdict"]),
        ("Sets", ["set", "frozenset"]),
        ("Misc", ["heapq", "collections.Counter"]),
    ]


def main_count(argv: Sequence[str] | None = None) -> int:
    """Print how often each sample number occurs."""
    argparse.ArgumentParser(description="Count number frequencies").parse_args(argv)
    result = count_frequencies(SAMPLE_NUMBERS)
    print(f"The frequency of each number in the vector is: {result!r}")
    return 0


def main_add(argv: Sequence[str] | None = None) -> int:
    """Print the sum of the fixed values."""
    argparse.ArgumentParser(description="Sum a constant list").parse_args(argv)
    print(f"The sum of the elements in the vector is: {add()}")
    return 0


def main_overview(argv: Sequence[str] | None = None) -> int:
    """Print the common collection types."""
    argparse.ArgumentParser(description="List common collections").parse_args(argv)
    print("Common Python Collections:")
    for kind, names in collections_overview():
        print(f"\n\t{kind}:")
        for name in names:
            print(f"\t\t{name}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main_count())