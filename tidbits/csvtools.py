"""Read CSV records from a stream and show CSV files as typed tables."""

from __future__ import annotations

import argparse
import csv
import json
import sys
from collections.abc import Iterator, Sequence
from os import PathLike
from typing import TextIO, Union

Cell = Union[int, float, str]
DEFAULT_TABLE = "data/iris.csv"


class CsvError(ValueError):
    """Raised for malformed CSV input."""


def _parse(stream: TextIO) -> tuple[list[str], Iterator[list[str]]]:
    reader = csv.reader(stream)

    def nonblank() -> Iterator[list[str]]:
        try:
            for row in reader:
                if row:
                    yield row
        except csv.Error as error:
            raise CsvError(f"line {reader.line_num}: {error}") from error

    rows = nonblank()
    header = next(rows, None)
    if header is None:
        return [], iter(())

    def body() -> Iterator[list[str]]:
        for row in rows:
            if len(row) != len(header):
                raise CsvError(
                    f"line {reader.line_num}: found record with {len(row)} fields, "
                    f"but the previous record has {len(header)} fields"
                )
            yield row

    return header, body()


def read_records(stream: TextIO) -> Iterator[list[str]]:
    """Yield the records of CSV text after its header row.

    Blank lines are skipped; a record whose field count differs from the
    header raises :class:`CsvError`.
    """
    _, body = _parse(stream)
    yield from body


def _convert(values: list[str]) -> list[Cell]:
    for kind in (int, float):
        try:
            return [kind(value) for value in values]
        except ValueError:
            continue
    return list(values)


def read_table(path: str | PathLike[str]) -> tuple[list[str], list[list[Cell]]]:
    """Read a CSV file with a header; columns become ints or floats where they can."""
    with open(path, newline="", encoding="utf-8") as handle:
        header, body = _parse(handle)
        rows = list(body)
    if not header:
        raise CsvError(f"{path}: no header row")
    columns = [_convert(list(column)) for column in zip(*rows)] if rows else []
    typed_rows = [list(row) for row in zip(*columns)] if columns else []
    return header, typed_rows


def _dtype(column: list[Cell]) -> str:
    if column and all(isinstance(v, int) and not isinstance(v, bool) for v in column):
        return "i64"
    if column and all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in column):
        return "f64"
    return "str"


def _show(value: Cell) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def format_table(header: Sequence[str], rows: Sequence[Sequence[Cell]]) -> str:
    """Draw the table with its shape, column types and a box around it."""
    columns = [[row[index] for row in rows] for index in range(len(header))]
    dtypes = [_dtype(column) for column in columns]
    shown = [[_show(value) for value in row] for row in rows]
    widths = [
        max([len(name), 3, len(dtype), *(len(row[index]) for row in shown)])
        for index, (name, dtype) in enumerate(zip(header, dtypes))
    ]

    def rule(left: str, middle: str, right: str, fill: str) -> str:
        return left + middle.join(fill * (width + 2) for width in widths) + right

    def line(cells: Sequence[str]) -> str:
        return "│ " + " ┆ ".join(c.ljust(w) for c, w in zip(cells, widths)) + " │"

    out = [f"shape: ({len(rows)}, {len(header)})", rule("┌", "┬", "┐", "─")]
    out.append(line(header))
    out.append(line(["---"] * len(header)))
    out.append(line(dtypes))
    out.append(rule("╞", "╪", "╡", "═"))
    out.extend(line(row) for row in shown)
    out.append(rule("└", "┴", "┘", "─"))
    return "\n".join(out)


def main_records(argv: Sequence[str] | None = None) -> int:
    """Print every CSV record read from standard input."""
    argparse.ArgumentParser(description="Print CSV records from stdin").parse_args(argv)
    try:
        for record in read_records(sys.stdin):
            print(f"StringRecord({json.dumps(record, ensure_ascii=False)})")
    except CsvError as error:
        print(f"error running example: {error}")
        return 1
    return 0


def main_table(argv: Sequence[str] | None = None) -> int:
    """Print a CSV file as a table."""
    parser = argparse.ArgumentParser(description="Show a CSV file as a table")
    parser.add_argument("path", nargs="?", default=DEFAULT_TABLE, help="CSV file to show")
    args = parser.parse_args(argv)
    try:
        header, rows = read_table(args.path)
    except (OSError, CsvError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(format_table(header, rows))
    return 0


if __name__ == "__main__":
    raise SystemExit(main_records())