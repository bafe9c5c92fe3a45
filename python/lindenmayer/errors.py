"""Exception hierarchy for the L-system engine."""


class LSystemError(Exception):
    pass


class IncompleteGrammarError(LSystemError):
    """A symbol has no entry in the rule or action mapping."""

    def __init__(self, symbol: str, mapping: str):
        self.symbol = symbol
        self.mapping = mapping
        super().__init__(f"symbol {symbol!r} has no entry in {mapping}")


class StackUnderflowError(LSystemError):
    """Pop with nothing saved on the turtle stack (malformed system)."""

    def __init__(self, symbol: str, index: int):
        self.symbol = symbol
        self.index = index
        super().__init__(
            f"malformed system: pop {symbol!r} at index {index} with empty stack"
        )


class UnknownPresetError(LSystemError, KeyError):
    def __str__(self) -> str:
        return f"unknown preset {self.args[0]!r}"


class PathFinalizedError(LSystemError):
    pass
