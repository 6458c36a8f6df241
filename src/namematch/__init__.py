"""namematch: fuzzy similarity scoring for person and company names."""

from namematch.distance import edit_distance
from namematch.exceptions import (
    EmptyCandidateList,
    InvalidConfiguration,
    NameMatchError,
    NoMatchFound,
)
from namematch.matcher import NameMatcher, best_similarity, similarity
from namematch.models import BestMatch, ScoreBreakdown, Token, TokenMatch
from namematch.normalise import normalise
from namematch.tokens import default_weight, tokenize

__all__ = [
    "NameMatcher",
    "similarity",
    "best_similarity",
    "edit_distance",
    "normalise",
    "tokenize",
    "default_weight",
    "Token",
    "TokenMatch",
    "ScoreBreakdown",
    "BestMatch",
    "NameMatchError",
    "InvalidConfiguration",
    "EmptyCandidateList",
    "NoMatchFound",
]
