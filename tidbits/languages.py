"""Weigh popular programming languages by how long they have been around."""

from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence

CURRENT_YEAR = 2024
MIN_WEIGHT = 1
WEIGHT_SPAN = 99


def init_languages() -> dict[str, int]:
    """Return popular languages with the year each first appeared."""
    return {
        "JavaScript": 1995,
        "HTML/CSS": 1990,
        "Python": 1991,
        "SQL": 1974,
        "TypeScript": 2012,
        "Bash/Shell": 1989,
        "Java": 1995,
        "C#": 2000,
        "C++": 1985,
        "C": 1972,
        "PHP": 1995,
        "PowerShell": 2006,
        "Go": 2007,
        "Rust": 2010,
    }


def calculate_weights(
    languages: Mapping[str, int], current_year: int = CURRENT_YEAR
) -> dict[str, int]:
    """Map each language to a weight from 1 (newest) to 100 (oldest).

    The result is ordered by language name. When every language is equally
    old, every weight is 1.
    """
    years_active = {name: current_year - year for name, year in languages.items()}
    if not years_active:
        return {}
    youngest = min(years_active.values())
    oldest = max(years_active.values())
    span = oldest - youngest
    weights = {}
    for name in sorted(years_active):
        normalized = (years_active[name] - youngest) / span if span else 0.0
        weights[name] = int(normalized * WEIGHT_SPAN) + MIN_WEIGHT
    return weights


def main(argv: Sequence[str] | None = None) -> int:
    """Print the weight of every known language."""
    argparse.ArgumentParser(description="Weigh languages by age").parse_args(argv)
    weights = calculate_weights(init_languages())
    print("Language weighing from 1-100 by age (1 is newest and 100 is oldest):")
    for name, weight in weights.items():
        print(f"{name}: {weight}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())