from .errors import (
    IncompleteGrammarError,
    LSystemError,
    PathFinalizedError,
    StackUnderflowError,
    UnknownPresetError,
)
from .grammar import Action, Grammar
from .path import Path, PathCommand, PathInstruction
from .presets import PRESETS, Preset, from_preset, get_preset
from .rewriter import expand, generations, rewrite
from .turtle import Turtle, TurtleState, interpret
