"""
Name similarity: command-line front end
=========================================
Thin wrapper around the namematch library.

Usage:
    namematch "Jack Danels" "Jack Daniels"               # one score
    namematch "jack" "Jack Daniels" "Unrelated Name"     # best of several
    namematch "jacko" "Jack Daniels" --explain           # per-token JSON

Matcher settings are read from environment variables:
    NAMEMATCH_DECAY_BASE          Partial-credit decay per edit (0.85)
    NAMEMATCH_MAX_EDIT_DISTANCE   Largest edit distance that scores (5)

Command-line flags take priority over the environment.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from namematch.exceptions import InvalidConfiguration, NoMatchFound
from namematch.matcher import (
    DEFAULT_DECAY_BASE,
    DEFAULT_MAX_EDIT_DISTANCE,
    NameMatcher,
)

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _env_default(name: str, default: str) -> str:
    return os.environ.get(name, default)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="namematch",
        description="Fuzzy similarity score between an input name and candidate names.",
    )
    parser.add_argument("input", help="Name to look for.")
    parser.add_argument("targets", nargs="+", help="Candidate name(s) to score against.")
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the per-token breakdown as JSON.",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Exit with status 1 unless the best score reaches this value.",
    )
    parser.add_argument(
        "--decay-base",
        type=float,
        default=None,
        help=f"Partial-credit decay per edit (default: $NAMEMATCH_DECAY_BASE or {DEFAULT_DECAY_BASE}).",
    )
    parser.add_argument(
        "--max-edit-distance",
        type=int,
        default=None,
        help=(
            "Largest edit distance that still scores "
            f"(default: $NAMEMATCH_MAX_EDIT_DISTANCE or {DEFAULT_MAX_EDIT_DISTANCE})."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log scoring decisions.")
    return parser.parse_args(argv)


def build_matcher(args: argparse.Namespace) -> NameMatcher:
    """Create a NameMatcher from flags, falling back to the environment."""
    decay_base = args.decay_base
    if decay_base is None:
        raw = _env_default("NAMEMATCH_DECAY_BASE", str(DEFAULT_DECAY_BASE))
        try:
            decay_base = float(raw)
        except ValueError:
            raise InvalidConfiguration("NAMEMATCH_DECAY_BASE", raw, "not a number")

    max_edit_distance = args.max_edit_distance
    if max_edit_distance is None:
        raw = _env_default("NAMEMATCH_MAX_EDIT_DISTANCE", str(DEFAULT_MAX_EDIT_DISTANCE))
        try:
            max_edit_distance = int(raw)
        except ValueError:
            raise InvalidConfiguration("NAMEMATCH_MAX_EDIT_DISTANCE", raw, "not an integer")

    return NameMatcher(decay_base=decay_base, max_edit_distance=max_edit_distance)


def _run(matcher: NameMatcher, args: argparse.Namespace) -> int:
    if args.explain:
        report = [matcher.explain(args.input, t).to_dict() for t in args.targets]
        print(json.dumps(report[0] if len(report) == 1 else report, indent=2, ensure_ascii=False))
    elif len(args.targets) == 1:
        print(f"{matcher.similarity(args.input, args.targets[0]):.4f}")
    else:
        for target in args.targets:
            print(f"{matcher.similarity(args.input, target):.4f}  {target}")

    threshold = args.threshold if args.threshold is not None else 0.0
    try:
        best = matcher.best_match(args.input, args.targets, threshold=threshold)
    except NoMatchFound as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if len(args.targets) > 1 and not args.explain:
        print(f"best: {best.target} ({best.score:.4f})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: prints scores and returns the process exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=_LOG_FORMAT,
        datefmt=_DATE_FORMAT,
    )

    try:
        matcher = build_matcher(args)
    except InvalidConfiguration as exc:
        logger.debug("configuration rejected", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    return _run(matcher, args)


if __name__ == "__main__":
    raise SystemExit(main())
