"""Typed token and result models for namematch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Token:
    """A normalised word of a name and its base importance."""

    value: str
    weight: float = 1.0


@dataclass(frozen=True)
class TokenMatch:
    """How much of an input token's weight was found in the candidate."""

    value: str
    weight: float
    awarded_weight: float = 0.0
    matched: Optional[str] = None     # candidate token that earned the award
    distance: Optional[int] = None    # 0 for exact, None when unmatched

    def to_dict(self) -> dict:
        return {
            "value": self.value,
            "weight": self.weight,
            "awarded_weight": round(self.awarded_weight, 4),
            "matched": self.matched,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    """A similarity score together with the per-token decisions behind it."""

    input: str
    target: str
    score: float                      # 0.0-1.0
    tokens: tuple[TokenMatch, ...] = ()

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "input": self.input,
            "target": self.target,
            "score": round(self.score, 4),
            "tokens": [t.to_dict() for t in self.tokens],
        }


@dataclass(frozen=True)
class BestMatch:
    """The highest-scoring candidate of a multi-candidate lookup."""

    target: str
    index: int
    score: float

    def to_dict(self) -> dict:
        return {
            "target": self.target,
            "index": self.index,
            "score": round(self.score, 4),
        }
