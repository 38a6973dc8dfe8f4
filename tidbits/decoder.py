"""Statistical breaking of Caesar-shifted text by English letter frequencies."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from tidbits import caesar

DEFAULT_DEPTH = 26


@dataclass(frozen=True)
class LetterStat:
    """Occurrence statistics for one character of a text."""

    letter: str
    count: int
    frequency: float
    english_frequency: float | None
    english_difference: float


@dataclass(frozen=True)
class ShiftGuess:
    """Result of trying a range of shifts against a text."""

    depth: int
    shift: int
    decrypted: str
    score: float


def english_frequencies() -> dict[str, float]:
    """Percent frequencies of the ten most common English letters."""
    return {
        "e": 12.7,
        "t": 9.1,
        "a": 8.2,
        "o": 7.5,
        "i": 7.0,
        "n": 6.7,
        "s": 6.3,
        "h": 6.1,
        "r": 6.0,
        "d": 4.3,
    }


def stats_analysis(text: str) -> list[LetterStat]:
    """Count every character of ``text`` and compare with English frequencies."""
    counts = Counter(text)
    total = sum(counts.values())
    reference = english_frequencies()
    stats = []
    for letter, count in counts.items():
        frequency = count / total * 100.0
        english = reference.get(letter.lower()) if letter.isascii() else None
        difference = abs(frequency - english) if english is not None else 0.0
        stats.append(LetterStat(letter, count, frequency, english, difference))
    return stats


def _fmt(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def print_stats_analysis(text: str) -> None:
    """Print one line of statistics for each character of ``text``."""
    for stat in stats_analysis(text):
        english = stat.english_frequency if stat.english_frequency is not None else 0.0
        print(
            f"{stat.letter}: {stat.count} ({_fmt(stat.frequency)}%), "
            f"English Freq: {_fmt(english)} ({_fmt(stat.english_difference)}%)"
        )


def decrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter forward by ``shift``."""
    return caesar.encrypt(text, shift)


def _score(text: str) -> float:
    return sum(
        (1.0 - stat.english_difference / stat.english_frequency) * stat.frequency
        for stat in stats_analysis(text)
        if stat.english_frequency is not None
    )


def guess_shift(text: str, depth: int = DEFAULT_DEPTH) -> ShiftGuess:
    """Try shifts ``0 .. depth-1`` and keep the one whose output looks most English."""
    best = ShiftGuess(depth=depth, shift=0, decrypted="", score=0.0)
    for shift in range(depth):
        candidate = decrypt(text, shift)
        score = _score(candidate)
        print(f"Shift: {shift}, Score: {_fmt(score)}")
        if score > best.score:
            best = ShiftGuess(depth=depth, shift=shift, decrypted=candidate, score=score)
    return best


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reverse engineer a Caesar cipher")
    parser.add_argument("-m", "--message", required=True, help="The message to decrypt")
    parser.add_argument(
        "-s", "--stats", action="store_true", help="Statistical information about the message"
    )
    parser.add_argument("-g", "--guess", action="store_true", help="Guess the shift")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    args = _build_parser().parse_args(argv)
    if args.stats:
        print_stats_analysis(args.message)
    if args.guess:
        guess = guess_shift(args.message, DEFAULT_DEPTH)
        print(f"Best shift: {guess.shift} (out of {guess.depth}), score: {_fmt(guess.score)}")
        print(f"Decrypted message: {guess.decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())