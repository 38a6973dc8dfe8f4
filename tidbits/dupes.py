"""Detect duplicated phrases by their SHA3-256 digests."""

from __future__ import annotations

import argparse
import hashlib
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

PHRASES = (
    "man can be destroyed but not defeated",
    "but man is not made for defeat",
    "a man can be destroyed but not defeated",
    "the old man was thin and gaunt",
    "everything about him was old",
    "the sail was patched with flour sacks",
    "he was an old man who fished alone",
    "the old man had taught the boy to fish",
    "the old man looked at him with his sun burned confident loving eyes",
    "his eyes were cheerful and undefeated",
)


@dataclass(frozen=True)
class DuplicateReport:
    """Summary of duplicated phrases.

    ``duplicates`` holds ``(hex digest, count, phrase)`` for every phrase seen
    more than once, in order of first appearance.
    """

    total_phrases: int
    unique_phrases: int
    duplicates: list[tuple[str, int, str]] = field(default_factory=list)

    @property
    def unique_duplicates(self) -> int:
        return len(self.duplicates)

    @property
    def combined_duplicates(self) -> int:
        return sum(count - 1 for _, count, _ in self.duplicates)


def generate_random_phrases(rng: random.Random | None = None) -> list[str]:
    """Repeat each known phrase one to three times and shuffle the result."""
    if rng is None:
        rng = random.Random()
    phrases = [phrase for phrase in PHRASES for _ in range(rng.randint(1, 3))]
    rng.shuffle(phrases)
    return phrases


def analyze_duplicates(phrases: Iterable[str]) -> DuplicateReport:
    """Group phrases by SHA3-256 digest and report those seen more than once."""
    seen: dict[str, list] = {}
    total = 0
    for phrase in phrases:
        total += 1
        digest = hashlib.sha3_256(phrase.encode("utf-8")).hexdigest()
        entry = seen.setdefault(digest, [0, phrase])
        entry[0] += 1
    duplicates = [
        (digest, count, phrase) for digest, (count, phrase) in seen.items() if count > 1
    ]
    return DuplicateReport(total_phrases=total, unique_phrases=len(seen), duplicates=duplicates)


def report_duplicates(phrases: Iterable[str]) -> DuplicateReport:
    """Analyse ``phrases``, print the findings and return the report."""
    report = analyze_duplicates(phrases)
    print(f"Total number of phrases: {report.total_phrases}")
    for digest, count, phrase in report.duplicates:
        print(f"{digest} - {count} times: {phrase}")
    print(f"Total Unique Phrases: {report.unique_phrases}")
    print(f"Total Unique Duplicates: {report.unique_duplicates}")
    print(f"Total Combined Duplicates: {report.combined_duplicates}")
    return report


def main(argv: Sequence[str] | None = None) -> int:
    """Generate random duplicated phrases and report on them."""
    argparse.ArgumentParser(description="Find duplicated phrases by hash").parse_args(argv)
    report_duplicates(generate_random_phrases())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())