"""Plot a series of numbers as an ASCII line chart."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from itertools import pairwise

CITIES = ("Lisbon", "Madrid", "Paris", "Berlin", "Copenhagen", "Stockholm", "Moscow")
DISTANCES = (0.0, 502.56, 1053.36, 2187.27, 2636.42, 3117.23, 4606.35)


def _round(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _precision(minimum: float, maximum: float) -> int:
    precision = 2
    if minimum == 0 and maximum == 0:
        log_maximum = -1.0
    else:
        log_maximum = math.log10(max(abs(maximum), abs(minimum)))
    if log_maximum < 0:
        if math.fmod(log_maximum, 1) != 0:
            precision += int(abs(log_maximum))
        else:
            precision += int(abs(log_maximum) - 1)
    elif log_maximum > 2:
        precision = 0
    return precision


def plot(
    series: Iterable[float], height: int = 0, offset: int = 3, caption: str = ""
) -> str:
    """Render ``series`` as a chart ``height`` rows tall with labels on the left.

    A height of 0 picks one from the range of the data; an offset of 0 means 3.
    """
    values = [float(value) for value in series]
    if not values:
        raise ValueError("cannot plot an empty series")
    if not all(math.isfinite(value) for value in values):
        raise ValueError("series values must be finite")
    if height < 0 or offset < 0:
        raise ValueError("height and offset must not be negative")

    minimum, maximum = min(values), max(values)
    interval = abs(maximum - minimum)
    if height == 0:
        if interval == 0:
            height = 3
        elif interval <= 1:
            height = int(interval * 10 ** math.ceil(-math.log10(interval)))
        else:
            height = int(interval)
    if offset == 0:
        offset = 3

    ratio = height / interval if interval != 0 else 1.0
    min2 = int(_round(minimum * ratio))
    max2 = int(_round(maximum * ratio))
    rows = abs(max2 - min2)
    width = len(values) + offset
    grid = [[" "] * width for _ in range(rows + 1)]

    precision = _precision(minimum, maximum)
    label_width = max(len(f"{maximum:.{precision}f}"), len(f"{minimum:.{precision}f}"))

    for y in range(min2, max2 + 1):
        magnitude = maximum - (y - min2) * interval / rows if rows > 0 else float(y)
        label = f"{magnitude:{label_width + 1}.{precision}f}"
        row = y - min2
        grid[row][max(offset - len(label), 0)] = label
        grid[row][offset - 1] = "┼" if y == 0 else "┤"

    def level(value: float) -> int:
        return int(_round(value * ratio)) - min2

    grid[rows - level(values[0])][offset - 1] = "┼"
    for x, (current, following) in enumerate(pairwise(values)):
        y0, y1 = level(current), level(following)
        column = x + offset
        if y0 == y1:
            grid[rows - y0][column] = "─"
            continue
        if y0 > y1:
            grid[rows - y1][column] = "╰"
            grid[rows - y0][column] = "╮"
        else:
            grid[rows - y1][column] = "╭"
            grid[rows - y0][column] = "╯"
        for y in range(min(y0, y1) + 1, max(y0, y1)):
            grid[rows - y][column] = "│"

    lines = ["".join(cells) for cells in grid]
    if caption:
        lines.append(" " * (offset + label_width + 2) + caption)
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Plot the distance travelled along a route through European capitals."""
    argparse.ArgumentParser(description="Plot distances travelled").parse_args(argv)
    print(" > ".join(CITIES))
    print(plot(DISTANCES, height=10, offset=10, caption="Travelled distances (km)"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())