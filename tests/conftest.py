"""Shared test helpers."""

from panchayat.election import ElectionRegistry
from panchayat.models import Candidate


def make_election(candidates: dict[str, str], voters: dict[str, int] | None = None) -> ElectionRegistry:
    """Build an ElectionRegistry from compact tables.

    Args:
        candidates: {candidate_id: party}; names are derived from the ids
        voters: {voter_id: age}; every voter is registered

    Returns:
        ElectionRegistry with the candidates in table order and voters registered.
    """
    election = ElectionRegistry([
        Candidate(id=cid, name=f"Candidate {cid}", party=party)
        for cid, party in candidates.items()
    ])
    for vid, age in (voters or {}).items():
        assert election.register_voter({"id": vid, "name": f"Voter {vid}", "age": age})
    return election


def succeeded(vote):
    return ("ok", vote)


def failed(reason):
    return ("error", reason)


def cast(election: ElectionRegistry, ballots: dict[str, str]) -> list:
    """Cast {voter_id: candidate_id} ballots in order and return each outcome."""
    return [election.cast_vote(vid, cid, succeeded, failed) for vid, cid in ballots.items()]


def result_ids(results) -> list[str]:
    return [r.id for r in results]
