"""Built-in grammars known to produce something interesting.

See the Wikipedia page "L-system" for background on each of them.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .errors import UnknownPresetError
from .grammar import Action, Grammar

# brackets rewrite to themselves wherever they are used
_BRACKETS = {"[": "[", "]": "]"}
_BRACKET_ACTIONS = {"[": Action.PUSH, "]": Action.POP}


class Preset(NamedTuple):
    name: str
    key: str
    title: str
    grammar: Grammar
    generations: int
    # past this the string no longer fits in memory
    max_generations: int


HEIGHWAY_DRAGON = Preset(
    name="heighway_dragon",
    key="h",
    title="Heighway Dragon",
    grammar=Grammar(
        axiom="F",
        rules={"F": "F+G", "G": "F-G", "+": "+", "-": "-"},
        actions={
            "F": Action.FORWARD,
            "G": Action.FORWARD,
            "+": Action.INCREMENT_ANGLE,
            "-": Action.DECREMENT_ANGLE,
        },
        angle_delta=np.pi / 2,
    ),
    generations=16,
    max_generations=20,
)

PLANT = Preset(
    name="plant",
    key="p",
    title="Plant",
    grammar=Grammar(
        axiom="X",
        rules={"X": "F+[[X]-X]-F[-FX]+X", "F": "FF", "+": "+", "-": "-", **_BRACKETS},
        actions={
            "X": Action.NOOP,
            "F": Action.FORWARD,
            "+": Action.INCREMENT_ANGLE,
            "-": Action.DECREMENT_ANGLE,
            **_BRACKET_ACTIONS,
        },
        angle_delta=np.radians(25.0),
    ),
    generations=6,
    max_generations=9,
)

TREE = Preset(
    name="tree",
    key="t",
    title="Tree",
    grammar=Grammar(
        axiom="0",
        rules={"0": "1[l0]r0", "1": "11", "l": "l", "r": "r", **_BRACKETS},
        actions={
            "0": Action.FORWARD,
            "1": Action.FORWARD,
            "l": Action.INCREMENT_ANGLE,
            "r": Action.DECREMENT_ANGLE,
            **_BRACKET_ACTIONS,
        },
        angle_delta=np.pi / 6,
    ),
    generations=7,
    max_generations=16,
)

PRESETS = {preset.name: preset for preset in (HEIGHWAY_DRAGON, PLANT, TREE)}
PRESET_KEYS = {preset.key: preset for preset in PRESETS.values()}


def get_preset(identifier: str) -> Preset:
    """Look up a preset by name ("plant") or menu key ("p")."""
    try:
        return PRESETS.get(identifier) or PRESET_KEYS[identifier]
    except KeyError:
        raise UnknownPresetError(identifier) from None


def from_preset(identifier: str) -> tuple[Grammar, int]:
    """Return the preset's grammar and its recommended generation count."""
    preset = get_preset(identifier)
    return preset.grammar, preset.generations
