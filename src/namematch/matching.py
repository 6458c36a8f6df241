"""Token matching and score aggregation."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence

from namematch.distance import edit_distance
from namematch.models import Token, TokenMatch

logger = logging.getLogger(__name__)


def match_token(
    token: Token,
    candidates: Sequence[Token],
    decay_base: float,
    max_edit_distance: int,
) -> TokenMatch:
    """
    Award *token* its weight for the closest candidate token.

    An exact value match earns the full weight. Otherwise the weight
    decays as ``decay_base ** distance`` for the nearest candidate within
    *max_edit_distance* edits, and is 0 when none is that close.
    """
    for cand in candidates:
        if cand.value == token.value:
            return TokenMatch(
                value=token.value,
                weight=token.weight,
                awarded_weight=token.weight,
                matched=cand.value,
                distance=0,
            )

    # The length difference is a lower bound on the edit distance, so
    # anything further apart cannot be within the threshold.
    pool = [
        c for c in candidates
        if abs(len(token.value) - len(c.value)) <= max_edit_distance
    ]
    if not pool:
        logger.debug("token '%s': no candidate within length range", token.value)
        return TokenMatch(value=token.value, weight=token.weight)

    best: TokenMatch | None = None
    best_distance = max_edit_distance + 1
    for cand in pool:
        d = edit_distance(token.value, cand.value)
        if d < best_distance:
            best_distance = d
            best = TokenMatch(
                value=token.value,
                weight=token.weight,
                awarded_weight=token.weight * decay_base ** d,
                matched=cand.value,
                distance=d,
            )

    if best is None:
        logger.debug(
            "token '%s': nearest candidate beyond %d edits",
            token.value, max_edit_distance,
        )
        return TokenMatch(value=token.value, weight=token.weight)

    logger.debug(
        "token '%s' ~ '%s' at distance %d, awarded %.4f",
        token.value, best.matched, best.distance, best.awarded_weight,
    )
    return best


def match_tokens(
    input_tokens: Sequence[Token],
    candidate_tokens: Sequence[Token],
    decay_base: float,
    max_edit_distance: int,
) -> tuple[TokenMatch, ...]:
    """
    Match every input token against the candidate tokens independently.

    Several input tokens may match the same candidate token, and
    candidate tokens nobody matched are ignored: the comparison is
    anchored on the input.
    """
    return tuple(
        match_token(token, candidate_tokens, decay_base, max_edit_distance)
        for token in input_tokens
    )


def root_mean_square(weights: Iterable[float]) -> float:
    """
    Combine awarded weights into one score.

    Squaring before averaging penalises partial matches, so one exact plus
    one partial token beats two partial tokens with the same mean.
    Returns 0.0 for no weights.
    """
    values = list(weights)
    if not values:
        return 0.0
    return math.sqrt(sum(w * w for w in values) / len(values))
