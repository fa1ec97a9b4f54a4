"""Orchestrator: run a whole election document through a registry."""

from collections.abc import Mapping
from typing import Any

from panchayat.election import ElectionRegistry
from panchayat.models import Candidate, ElectionReport


class ElectionDocumentError(Exception):
    """Error in the structure of an election document."""
    pass


def _load_candidates(document: Mapping[str, Any]) -> list[Candidate]:
    entries = document.get("candidates")
    if not isinstance(entries, list) or not entries:
        raise ElectionDocumentError("The election document has no candidates.")
    try:
        return [Candidate.from_dict(entry) for entry in entries]
    except (KeyError, TypeError) as e:
        raise ElectionDocumentError(f"Malformed candidate entry: {e}") from e


def run_election(document: Mapping[str, Any]) -> ElectionReport:
    """Register every voter, cast every vote and report the outcome.

    Args:
        document: Mapping with ``candidates`` (required), ``voters`` and
            ``votes`` lists, and an optional ``name``. Votes are mappings
            with ``voter_id`` and ``candidate_id``.

    Returns:
        ElectionReport with standings, the winner and everything that was
        refused along the way

    Raises:
        ElectionDocumentError: If the candidate list is missing or malformed
    """
    election = ElectionRegistry(_load_candidates(document))

    rejected_voters = []
    for position, voter in enumerate(document.get("voters") or []):
        if not election.register_voter(voter):
            # Unidentifiable voters are reported by their position
            voter_id = voter.get("id") if isinstance(voter, Mapping) else None
            rejected_voters.append(str(voter_id) if voter_id is not None else f"#{position}")

    rejected_votes = []
    for vote in document.get("votes") or []:
        if not isinstance(vote, Mapping):
            rejected_votes.append(f"malformed vote entry {vote!r}")
            continue
        election.cast_vote(
            vote.get("voter_id"),
            vote.get("candidate_id"),
            lambda accepted: accepted,
            rejected_votes.append,
        )

    return ElectionReport(
        name=document.get("name", "Panchayat Election"),
        results=election.get_results(),
        winner=election.get_winner(),
        rejected_voters=rejected_voters,
        rejected_votes=rejected_votes,
    )
