"""Splitting normalised names into weighted tokens."""

from __future__ import annotations

from typing import Callable

from namematch.exceptions import InvalidConfiguration
from namematch.models import Token

WeightFn = Callable[[str], float]


def default_weight(value: str) -> float:
    """
    Base weight of a token, decided from its value alone.

    Every token currently counts fully. Common words ("the", "inc",
    "llc") can be given less weight here without touching the matcher.
    """
    return 1.0


def tokenize(normalised: str, weight_fn: WeightFn = default_weight) -> tuple[Token, ...]:
    """
    Split an already-normalised name on single spaces.

    An empty string has no tokens. Raises InvalidConfiguration if
    *weight_fn* returns a weight outside 0.0-1.0.
    """
    if not normalised:
        return ()

    tokens = []
    for value in normalised.split(" "):
        weight = float(weight_fn(value))
        if not 0.0 <= weight <= 1.0:
            raise InvalidConfiguration(
                "token weight", weight, f"weight for '{value}' must be within 0.0-1.0"
            )
        tokens.append(Token(value=value, weight=weight))
    return tuple(tokens)
