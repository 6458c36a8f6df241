"""NameMatcher, the main entry point for the library."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from namematch import distance
from namematch.exceptions import EmptyCandidateList, InvalidConfiguration, NoMatchFound
from namematch.matching import match_tokens, root_mean_square
from namematch.models import BestMatch, ScoreBreakdown, TokenMatch
from namematch.normalise import normalise
from namematch.tokens import WeightFn, default_weight, tokenize

logger = logging.getLogger(__name__)

DEFAULT_DECAY_BASE = 0.85
DEFAULT_MAX_EDIT_DISTANCE = 5


def _is_blank(s: Optional[str]) -> bool:
    return s is None or not s.strip()


class NameMatcher:
    """
    Fuzzy similarity scorer for person and company names.

    Scores are anchored on the input: ``similarity("jack", "Jack Daniels")``
    is 1.0 because every input token is found in the target, while the
    reverse comparison is lower because "daniels" has no counterpart.
    """

    def __init__(
        self,
        decay_base: float = DEFAULT_DECAY_BASE,
        max_edit_distance: int = DEFAULT_MAX_EDIT_DISTANCE,
        weight_fn: WeightFn = default_weight,
    ):
        if (
            isinstance(decay_base, bool)
            or not isinstance(decay_base, (int, float))
            or not 0.0 < decay_base <= 1.0
        ):
            raise InvalidConfiguration(
                "decay_base", decay_base, "must be greater than 0 and at most 1"
            )
        if (
            isinstance(max_edit_distance, bool)
            or not isinstance(max_edit_distance, int)
            or max_edit_distance < 0
        ):
            raise InvalidConfiguration(
                "max_edit_distance", max_edit_distance, "must be a non-negative integer"
            )
        if not callable(weight_fn):
            raise InvalidConfiguration("weight_fn", weight_fn, "must be callable")

        self._decay_base = float(decay_base)
        self._max_edit_distance = max_edit_distance
        self._weight_fn = weight_fn
        logger.debug(
            "NameMatcher(decay_base=%s, max_edit_distance=%d)",
            self._decay_base, self._max_edit_distance,
        )

    @property
    def decay_base(self) -> float:
        return self._decay_base

    @property
    def max_edit_distance(self) -> int:
        return self._max_edit_distance

    # ── Public API ────────────────────────────────────────────────

    def similarity(self, input_name: Optional[str], target: Optional[str]) -> float:
        """
        Score how well *target* covers *input_name*, from 0.0 to 1.0.

        Blank or missing names score 0.0; identical raw strings score 1.0
        without further work.
        """
        return self.explain(input_name, target).score

    def best_similarity(self, input_name: Optional[str], targets: Sequence[str]) -> float:
        """
        Return the highest similarity of *input_name* against any target.

        Raises EmptyCandidateList if *targets* is empty.
        """
        return self.best_match(input_name, targets).score

    def best_match(
        self,
        input_name: Optional[str],
        targets: Sequence[str],
        threshold: float = 0.0,
    ) -> BestMatch:
        """
        Find the target that best matches *input_name*.

        The earliest target wins ties. Raises EmptyCandidateList if
        *targets* is empty, or NoMatchFound if the best score is below
        *threshold*.
        """
        if not targets:
            raise EmptyCandidateList(input_name or "")

        best: Optional[BestMatch] = None
        for index, target in enumerate(targets):
            score = self.similarity(input_name, target)
            if best is None or score > best.score:
                best = BestMatch(target=target, index=index, score=score)
                # Nothing beats a perfect match
                if score == 1.0:
                    break

        if best.score < threshold:
            raise NoMatchFound(input_name or "", threshold)
        return best

    def explain(self, input_name: Optional[str], target: Optional[str]) -> ScoreBreakdown:
        """Score *input_name* against *target* and keep every token decision."""
        if _is_blank(input_name) or _is_blank(target):
            logger.debug("blank name, scoring 0: %r vs %r", input_name, target)
            return ScoreBreakdown(input=input_name or "", target=target or "", score=0.0)

        if input_name == target:
            tokens = tuple(
                TokenMatch(
                    value=t.value,
                    weight=t.weight,
                    awarded_weight=t.weight,
                    matched=t.value,
                    distance=0,
                )
                for t in tokenize(normalise(input_name), self._weight_fn)
            )
            return ScoreBreakdown(input=input_name, target=target, score=1.0, tokens=tokens)

        input_tokens = tokenize(normalise(input_name), self._weight_fn)
        candidate_tokens = tokenize(normalise(target), self._weight_fn)

        matches = match_tokens(
            input_tokens,
            candidate_tokens,
            self._decay_base,
            self._max_edit_distance,
        )
        score = root_mean_square(m.awarded_weight for m in matches)
        logger.debug("'%s' vs '%s': %.4f", input_name, target, score)
        return ScoreBreakdown(input=input_name, target=target, score=score, tokens=matches)

    @staticmethod
    def edit_distance(source: str, target: str) -> int:
        """Damerau-Levenshtein distance between two raw strings."""
        return distance.edit_distance(source, target)


# ── Module-level helpers ──────────────────────────────────────────

_default_matcher = NameMatcher()


def similarity(input_name: Optional[str], target: Optional[str]) -> float:
    """Score *input_name* against *target* with the default settings."""
    return _default_matcher.similarity(input_name, target)


def best_similarity(input_name: Optional[str], targets: Sequence[str]) -> float:
    """Best score of *input_name* across *targets* with the default settings."""
    return _default_matcher.best_similarity(input_name, targets)
