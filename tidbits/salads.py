"""Fruit salads built from shuffled lists, deques and CSV input."""

from __future__ import annotations

import argparse
import json
import random
import sys
from collections import deque
from collections.abc import Iterable, Sequence
from itertools import count
from os import PathLike

VECTOR_FRUITS = ("Orange", "Fig", "Pomegranate", "Cherry", "Apple", "Pear", "Peach")
FRAMED_BASE = ("Arbutus", "Loquat", "Strawberry Tree Berry")
MEDITERRANEAN_FRUITS = (
    "Arbutus",
    "Loquat",
    "Strawberry Tree Berry",
    "Pomegranate",
    "Fig",
    "Cherry",
    "Orange",
    "Pear",
    "Peach",
    "Apple",
)
MUTABLE_BASE = ("apple", "banana", "cherry", "dates", "elderberries")


def _debug_list(items: Iterable[str]) -> str:
    return "[" + ", ".join(json.dumps(item, ensure_ascii=False) for item in items) + "]"


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def format_salad(fruits: Iterable[str]) -> str:
    """Join fruit names into one comma separated line."""
    return ", ".join(fruits)


def vector_salad(rng: random.Random | None = None) -> list[str]:
    """Return the seven base fruits in random order."""
    fruits = list(VECTOR_FRUITS)
    _rng(rng).shuffle(fruits)
    return fruits


def framed_salad(rng: random.Random | None = None) -> list[str]:
    """Shuffle three fruits, then put a pomegranate in front and a fig and cherry behind."""
    middle = list(FRAMED_BASE)
    _rng(rng).shuffle(middle)
    salad = deque(middle)
    salad.appendleft("Pomegranate")
    salad.append("Fig")
    salad.append("Cherry")
    return list(salad)


def mutable_demo() -> tuple[list[str], list[str]]:
    """Print a fruit list before and after appending figs; return both lists."""
    original = list(MUTABLE_BASE)
    print(f"Original fruit salad: {_debug_list(original)}")
    modified = [*MUTABLE_BASE, "figs"]
    print(f"Modified fruit salad: {_debug_list(modified)}")
    return original, modified


def create_fruit_salad(
    fruits: Iterable[str], rng: random.Random | None = None
) -> list[str]:
    """Return the given fruits in random order."""
    salad = list(fruits)
    _rng(rng).shuffle(salad)
    return salad


def pick_salad(num_fruits: int, rng: random.Random | None = None) -> list[str]:
    """Shuffle the known fruits and keep at most ``num_fruits`` of them."""
    if num_fruits < 0:
        raise ValueError(f"number of fruits must not be negative, got {num_fruits}")
    return create_fruit_salad(MEDITERRANEAN_FRUITS, rng)[:num_fruits]


def csv_to_list(text: str) -> list[str]:
    """Split ``text`` on commas and trim whitespace around every piece."""
    return [piece.strip() for piece in text.split(",")]


def read_fruits_from_file(path: str | PathLike[str]) -> list[str]:
    """Read comma separated fruit names from every line of a file."""
    fruits: list[str] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            fruits.extend(csv_to_list(line.rstrip("\r\n")))
    return fruits


def _non_negative(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"number must not be negative: {value!r}")
    return number


def _print_salad(fruits: Sequence[str]) -> None:
    print("Fruit Salad:")
    print(format_salad(fruits))


def main_vector(argv: Sequence[str] | None = None) -> int:
    """Print a shuffled fruit salad."""
    argparse.ArgumentParser(description="Make a shuffled fruit salad").parse_args(argv)
    _print_salad(vector_salad())
    return 0


def main_framed(argv: Sequence[str] | None = None) -> int:
    """Print a shuffled fruit salad with fixed fruits at both ends."""
    argparse.ArgumentParser(
        description="Make a fruit salad with fixed fruits at both ends"
    ).parse_args(argv)
    _print_salad(framed_salad())
    return 0


def main_cli_salad(argv: Sequence[str] | None = None) -> int:
    """Print a salad of the requested number of fruits."""
    parser = argparse.ArgumentParser(
        description="Number of fruits to include in the salad"
    )
    parser.add_argument("-n", "--number", type=_non_negative, required=True)
    args = parser.parse_args(argv)
    salad = pick_salad(args.number)
    print(f"Created Fruit salad with {args.number} fruits: {_debug_list(salad)}")
    return 0


def main_customize(argv: Sequence[str] | None = None) -> int:
    """Shuffle fruits given on the command line or read from a CSV file."""
    parser = argparse.ArgumentParser(description="Make a Fruit Salad")
    parser.add_argument(
        "-f", "--fruits", help="Fruits input as a string of comma separated values"
    )
    parser.add_argument("csvfile", nargs="?", help="File of comma separated fruits")
    args = parser.parse_args(argv)
    if args.csvfile is not None:
        try:
            with open(args.csvfile, encoding="utf-8") as handle:
                fruit_list = csv_to_list(handle.read())
        except OSError as error:
            parser.error(f"Could not read file: {error}")
    else:
        fruit_list = csv_to_list(args.fruits or "")
    print("Your fruit salad contains:")
    for fruit in create_fruit_salad(fruit_list):
        print(fruit)
    return 0


def main_lowmem(argv: Sequence[str] | None = None) -> int:
    """Repeatedly read a fruit file and print a fresh salad from it."""
    parser = argparse.ArgumentParser(
        description="Repeatedly build fruit salads from a CSV file"
    )
    parser.add_argument("--path", default="fruits.csv", help="Fruit file to read")
    parser.add_argument(
        "--count",
        type=_non_negative,
        default=None,
        help="Number of salads to make (default: run forever)",
    )
    args = parser.parse_args(argv)
    rounds = count() if args.count is None else range(args.count)
    for _ in rounds:
        try:
            fruits = read_fruits_from_file(args.path)
        except OSError as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        salad = create_fruit_salad(fruits)
        print(f"Created Fruit salad with {len(salad)} fruits: {_debug_list(salad)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main_vector())