"""Reading city coordinates from TSPLIB files and building distance matrices."""

from __future__ import annotations

import math
import os
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

MAX_POINTS = 3000
_SECTION = "NODE_COORD_SECTION"
_END = "EOF"
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class Point:
    """A city at integer coordinates."""

    x: int
    y: int


class TspFormatError(ValueError):
    """The file does not hold a usable coordinate section."""


def _leading_int(token: str, line: str) -> int:
    match = _INTEGER.match(token)
    if match is None:
        raise TspFormatError(f"malformed coordinate line: {line.strip()!r}")
    return int(match.group())


def parse_coordinates(lines: Iterable[str]) -> list[Point]:
    """Points listed between ``NODE_COORD_SECTION`` and ``EOF``.

    Each coordinate line holds a node number followed by x and y; the node
    number is ignored and the points keep the file's order.
    """
    rows = iter(lines)
    for line in rows:
        if _SECTION in line:
            break
    else:
        raise TspFormatError(f"{_SECTION} not found")

    points: list[Point] = []
    for line in rows:
        if _END in line:
            break
        fields = line.split()
        if not fields:
            continue
        if len(fields) < 3:
            raise TspFormatError(f"malformed coordinate line: {line.strip()!r}")
        _leading_int(fields[0], line)
        points.append(Point(_leading_int(fields[1], line), _leading_int(fields[2], line)))
        if len(points) > MAX_POINTS:
            raise TspFormatError(f"more than {MAX_POINTS} cities")
    return points


def read_coordinates(path: str | os.PathLike[str]) -> list[Point]:
    """Points from the TSPLIB file at ``path``."""
    with open(path, encoding="ascii", errors="replace") as handle:
        return parse_coordinates(handle)


def distance_matrix(points: Sequence[Point]) -> list[list[int]]:
    """Symmetric matrix of Euclidean distances rounded to the nearest integer."""
    return [
        [
            math.floor(math.sqrt((p.x - q.x) ** 2 + (p.y - q.y) ** 2) + 0.5)
            for q in points
        ]
        for p in points
    ]