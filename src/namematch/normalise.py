"""Name normalisation: case, diacritics, punctuation and spacing."""

from __future__ import annotations

import unicodedata
from typing import Optional

_SEPARATOR = " "


def _is_word_char(ch: str) -> bool:
    """Letters of any script and decimal digits survive normalisation."""
    category = unicodedata.category(ch)
    return category[0] == "L" or category == "Nd"


def strip_diacritics(raw: str) -> str:
    """Decompose to NFD and drop non-spacing marks (á -> a)."""
    decomposed = unicodedata.normalize("NFD", raw)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def normalise(raw: Optional[str]) -> str:
    """
    Canonicalise *raw* for comparison.

    Lower-cases, removes diacritics, and turns every run of whitespace or
    punctuation into a single space. The result never starts or ends
    with a space, e.g. ``"  O'Brien-Smith, José "`` -> ``"o brien smith jose"``.
    """
    if not raw:
        return ""

    out: list[str] = []
    for ch in strip_diacritics(raw.lower()):
        if _is_word_char(ch):
            out.append(ch)
        elif out and out[-1] != _SEPARATOR:
            out.append(_SEPARATOR)

    if out and out[-1] == _SEPARATOR:
        out.pop()
    return "".join(out)
