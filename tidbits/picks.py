"""Random fruit picks kept in heaps and sets."""

from __future__ import annotations

import argparse
import functools
import json
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

HEAP_FRUITS = ("Apple", "Orange", "Pear", "Peach", "Banana", "Fig", "Fig", "Fig", "Fig")
SET_FRUITS = (
    "apple",
    "banana",
    "cherry",
    "date",
    "elderberry",
    "fig",
    "grape",
    "honeydew",
)
SET_AMOUNTS = (1, 3, 5, 7, 9)
UNIQUE_FRUITS = (
    "Apple",
    "Banana",
    "Cherry",
    "Date",
    "Elderberry",
    "Fig",
    "Grape",
    "Honeydew",
)
PORTUGUESE_FRUITS = (
    "banana",
    "apple",
    "orange",
    "pear",
    "pineapple",
    "grape",
    "strawberry",
    "raspberry",
    "blueberry",
    "blackberry",
)
FIG = "Fig"


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _quoted(items: Iterable[str]) -> str:
    return ", ".join(json.dumps(item, ensure_ascii=False) for item in items)


@functools.total_ordering
@dataclass(frozen=True)
class Fruit:
    """A fruit in a salad; figs rank above every other fruit."""

    name: str

    @property
    def is_fig(self) -> bool:
        return self.name == FIG

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fruit):
            return NotImplemented
        return not self.is_fig and other.is_fig

    def __str__(self) -> str:
        return self.name


def generate_fruit_salad(rng: random.Random | None = None) -> list[Fruit]:
    """Draw fruits until two figs are drawn; return them in ascending priority."""
    rng = _rng(rng)
    salad: list[Fruit] = []
    figs = 0
    while figs < 2:
        fruit = Fruit(rng.choice(HEAP_FRUITS))
        if fruit.is_fig:
            figs += 1
        salad.append(fruit)
    return sorted(salad)


def fruit_sets(
    amounts: Iterable[int] = SET_AMOUNTS, rng: random.Random | None = None
) -> list[tuple[int, list[str]]]:
    """For each amount, gather shuffled fruits until the set holds that many.

    At least one fruit is always taken, and no more than the fruits available.
    Each set is returned sorted.
    """
    rng = _rng(rng)
    results = []
    for amount in amounts:
        shuffled = list(SET_FRUITS)
        rng.shuffle(shuffled)
        chosen: set[str] = set()
        for fruit in shuffled:
            chosen.add(fruit)
            if len(chosen) >= amount:
                break
        results.append((amount, sorted(chosen)))
    return results


def count_unique_fruits(draws: int = 100, rng: random.Random | None = None) -> int:
    """Draw ``draws`` random fruits and return how many different ones came up."""
    if draws < 0:
        raise ValueError(f"draws must not be negative, got {draws}")
    rng = _rng(rng)
    return len({rng.choice(UNIQUE_FRUITS) for _ in range(draws)})


def get_fruits(count: int, rng: random.Random | None = None) -> list[str]:
    """Return ``count`` fruits drawn at random, repeats allowed."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    rng = _rng(rng)
    return [rng.choice(PORTUGUESE_FRUITS) for _ in range(count)]


def _non_negative(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"number must not be negative: {value!r}")
    return number


def main_heap(argv: Sequence[str] | None = None) -> int:
    """Print a random salad holding two figs, figs last."""
    argparse.ArgumentParser(description="Fruit salad with two servings of figs").parse_args(
        argv
    )
    print("Random Fruit Salad With Two Servings of Figs:")
    for fruit in generate_fruit_salad():
        print(fruit)
    return 0


def main_sets(argv: Sequence[str] | None = None) -> int:
    """Print sorted fruit sets of several sizes."""
    argparse.ArgumentParser(description="Sorted sets of random fruits").parse_args(argv)
    for amount, fruits in fruit_sets():
        print(f"{amount}: {{{_quoted(fruits)}}}")
    return 0


def main_unique(argv: Sequence[str] | None = None) -> int:
    """Draw 100 fruits and print how many were distinct."""
    argparse.ArgumentParser(description="Count distinct random fruits").parse_args(argv)
    print("Generating 100 random fruits...")
    print(f"Number of unique fruits generated: {count_unique_fruits(100)}")
    return 0


def main_fruits(argv: Sequence[str] | None = None) -> int:
    """Print the requested number of random fruits."""
    parser = argparse.ArgumentParser(description="Return random fruits")
    parser.add_argument(
        "-c",
        "--count",
        type=_non_negative,
        default=1,
        help="The quantity of fruits to return",
    )
    args = parser.parse_args(argv)
    print(f"fruits: [{_quoted(get_fruits(args.count))}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main_fruits())