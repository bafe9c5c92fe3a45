"""Turtle interpreter: symbols in, path instructions out.

The turtle carries a position and a heading (radians). Branching is handled
with an explicit stack of saved states rather than recursion, so the walk is
a flat loop over the symbol string.

Coordinates are kept as floats during the walk and rounded half-to-even to
``precision`` decimal places only when an instruction is emitted, so
rounding error never accumulates along the path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

import numpy as np

from .errors import IncompleteGrammarError, StackUnderflowError
from .grammar import Action
from .path import Path, PathInstruction

DEFAULT_STEP = 10.0
COORDINATE_PRECISION = 3


@dataclass(frozen=True)
class TurtleState:
    position: tuple[float, float] = (0.0, 0.0)
    heading: float = 0.0


class Turtle:
    """State of a single walk.

    Parameters:
        angle_delta (float): Rotation for INCREMENT/DECREMENT_ANGLE, radians
        step_length (float): Distance covered by one FORWARD
        precision (int): Decimal places kept in emitted coordinates
    """

    def __init__(self, angle_delta: float, step_length: float = DEFAULT_STEP,
                 precision: int = COORDINATE_PRECISION):
        self.angle_delta = float(angle_delta)
        self.step_length = float(step_length)
        self.precision = precision
        self.state = TurtleState()
        self.stack: list[TurtleState] = []
        self.path = Path()
        self.path.move_to(*self._emit(self.state.position))

    def _emit(self, position: tuple[float, float]) -> tuple[float, float]:
        # adding 0.0 turns -0.0 into 0.0
        x, y = np.round(position, self.precision) + 0.0
        return float(x), float(y)

    def apply(self, action: Action, symbol: str, index: int) -> None:
        """Perform one state transition for ``symbol`` at ``index``."""
        state = self.state
        if action is Action.FORWARD:
            x, y = state.position
            x += self.step_length * np.cos(state.heading)
            y += self.step_length * np.sin(state.heading)
            self.state = TurtleState((float(x), float(y)), state.heading)
            self.path.line_to(*self._emit(self.state.position))
        elif action is Action.INCREMENT_ANGLE:
            self.state = TurtleState(state.position, state.heading + self.angle_delta)
        elif action is Action.DECREMENT_ANGLE:
            self.state = TurtleState(state.position, state.heading - self.angle_delta)
        elif action is Action.PUSH:
            self.stack.append(state)
        elif action is Action.POP:
            if not self.stack:
                raise StackUnderflowError(symbol, index)
            self.state = self.stack.pop()
            self.path.move_to(*self._emit(self.state.position))
        elif action is not Action.NOOP:
            raise TypeError(f"not an Action: {action!r}")

    def walk(self, symbols: Iterable[str], actions: Mapping[str, Action]) -> None:
        for index, symbol in enumerate(symbols):
            try:
                action = actions[symbol]
            except KeyError:
                raise IncompleteGrammarError(symbol, "actions") from None
            self.apply(action, symbol, index)


def interpret(
    symbols: Iterable[str],
    actions: Mapping[str, Action],
    angle_delta: float,
    step_length: float = DEFAULT_STEP,
    precision: int = COORDINATE_PRECISION,
) -> tuple[PathInstruction, ...]:
    """Walk ``symbols`` with a fresh turtle and return the emitted path.

    Parameters:
        symbols (Iterable[str]): The final generation
        actions (Mapping[str, Action]): Symbol -> turtle action
        angle_delta (float): Rotation per turn, in radians
        step_length (float): Length of each forward step (default 10.0)
        precision (int): Decimal places in emitted coordinates (default 3)

    Returns:
        tuple[PathInstruction, ...]: Move/line instructions, starting with a
        move to the origin

    Raises:
        IncompleteGrammarError: a symbol has no action
        StackUnderflowError: a pop occurs with an empty stack
    """
    turtle = Turtle(angle_delta, step_length, precision)
    turtle.walk(symbols, actions)
    return turtle.path.finalize()
