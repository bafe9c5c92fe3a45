"""Append-only accumulator of move-to / line-to instructions."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator, NamedTuple

from .errors import PathFinalizedError


class PathCommand(enum.Enum):
    MOVE_TO = "M"
    LINE_TO = "L"


class PathInstruction(NamedTuple):
    command: PathCommand
    x: float
    y: float


class Path:
    def __init__(self):
        self._instructions: list[PathInstruction] = []
        self._final: tuple[PathInstruction, ...] | None = None

    def _append(self, command: PathCommand, x: float, y: float) -> None:
        if self._final is not None:
            raise PathFinalizedError("path is finalized; no more instructions")
        self._instructions.append(PathInstruction(command, x, y))

    def move_to(self, x: float, y: float) -> None:
        """Reposition the pen without drawing."""
        self._append(PathCommand.MOVE_TO, x, y)

    def line_to(self, x: float, y: float) -> None:
        """Draw a straight segment from the current point to (x, y)."""
        self._append(PathCommand.LINE_TO, x, y)

    def finalize(self) -> tuple[PathInstruction, ...]:
        """Freeze the path and return its instructions in emission order."""
        if self._final is None:
            self._final = tuple(self._instructions)
        return self._final

    def __len__(self) -> int:
        return len(self._instructions)

    def __iter__(self) -> Iterator[PathInstruction]:
        return iter(self._instructions)


def bounds(instructions: Iterable[PathInstruction]) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y) over every instruction's point."""
    xs = []
    ys = []
    for ins in instructions:
        xs.append(ins.x)
        ys.append(ins.y)
    if not xs:
        raise ValueError("bounds() of an empty path")
    return min(xs), min(ys), max(xs), max(ys)
