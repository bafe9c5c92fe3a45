"""Grammar description for a Lindenmayer system.

A grammar is an axiom, a production-rule mapping and an action mapping that
tells the turtle what each symbol means. The two mappings are kept apart so
that each can be checked for completeness on its own.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .errors import IncompleteGrammarError


class Action(enum.Enum):
    FORWARD = "forward"
    INCREMENT_ANGLE = "increment_angle"
    DECREMENT_ANGLE = "decrement_angle"
    PUSH = "push"
    POP = "pop"
    NOOP = "noop"


@dataclass(frozen=True)
class Grammar:
    """Immutable L-system grammar.

    Parameters:
        axiom (str): The start string
        rules (Mapping[str, str]): Symbol -> replacement string
        actions (Mapping[str, Action]): Symbol -> turtle action
        angle_delta (float): Rotation per turn action, in radians

    Raises:
        IncompleteGrammarError: if a symbol reachable from the axiom has no
            rule or no action
    """

    axiom: str
    rules: Mapping[str, str]
    actions: Mapping[str, Action]
    angle_delta: float

    def __post_init__(self):
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions)))
        object.__setattr__(self, "angle_delta", float(self.angle_delta))

        for symbol in sorted(self.reachable_symbols()):
            if symbol not in self.rules:
                raise IncompleteGrammarError(symbol, "rules")
            if symbol not in self.actions:
                raise IncompleteGrammarError(symbol, "actions")

    def __hash__(self):
        return hash((
            self.axiom,
            frozenset(self.rules.items()),
            frozenset(self.actions.items()),
            self.angle_delta,
        ))

    def reachable_symbols(self) -> frozenset[str]:
        """Return every symbol that can occur in some generation.

        Symbols without a rule are included but not followed further.
        """
        seen = set(self.axiom)
        pending = list(seen)
        while pending:
            symbol = pending.pop()
            for ch in self.rules.get(symbol, ""):
                if ch not in seen:
                    seen.add(ch)
                    pending.append(ch)
        return frozenset(seen)
