"""Immutable vote tallies."""

from collections.abc import Iterable, Mapping
from functools import reduce

from panchayat.models import Vote


def tally_pure(current_tally: Mapping[str, int] | None, candidate_id: str) -> dict[str, int]:
    """Return a new tally with one more vote for ``candidate_id``.

    ``current_tally`` is left untouched; a candidate not yet present starts
    at 1. None is treated as an empty tally.
    """
    if current_tally is None:
        current_tally = {}
    return {**current_tally, candidate_id: current_tally.get(candidate_id, 0) + 1}


def tally_votes(votes: Iterable[Vote], initial: Mapping[str, int] | None = None) -> dict[str, int]:
    """Fold a sequence of votes into a tally, starting from ``initial``."""
    return reduce(
        lambda tally, vote: tally_pure(tally, vote.candidate_id),
        votes,
        dict(initial or {}),
    )
