"""Parallel string rewriting."""

from __future__ import annotations

from typing import Iterator, Mapping

from .errors import IncompleteGrammarError


def rewrite(current: str, rules: Mapping[str, str]) -> str:
    """Apply the production rules once to every symbol of ``current``.

    Parameters:
        current (str): The current generation
        rules (Mapping[str, str]): Symbol -> replacement string

    Returns:
        str: The next generation
    """
    out = []
    for ch in current:
        try:
            out.append(rules[ch])
        except KeyError:
            raise IncompleteGrammarError(ch, "rules") from None
    return "".join(out)


def expand(current: str, rules: Mapping[str, str], count: int) -> str:
    """Rewrite ``current`` ``count`` times.

    The output grows geometrically with ``count``; there is no upper bound
    enforced here.

    Parameters:
        current (str): The axiom or any intermediate generation
        rules (Mapping[str, str]): Symbol -> replacement string
        count (int): Number of generations, >= 0

    Returns:
        str: The generation ``count`` steps after ``current``
    """
    if count < 0:
        raise ValueError(f"generation count must be >= 0, got {count}")
    for _ in range(count):
        current = rewrite(current, rules)
    return current


def generations(current: str, rules: Mapping[str, str]) -> Iterator[str]:
    """Yield generation 0 (``current`` itself), 1, 2, ... without end."""
    while True:
        yield current
        current = rewrite(current, rules)
