"""In-memory election registry: voter registration, voting and results."""

from collections.abc import Callable, Iterable, Mapping
from functools import cmp_to_key
from numbers import Real
from typing import Any, TypeVar

from panchayat.models import Candidate, Result, Vote, Voter
from panchayat.tally import tally_votes

VOTING_AGE = 18
VOTER_FIELDS = ("id", "name", "age")

T = TypeVar("T")
Comparator = Callable[[Result, Result], int]


class ElectionRegistry:
    """A single election over a fixed list of candidates.

    Registered voters and cast votes are private to the instance and only
    change through ``register_voter`` and ``cast_vote``. Failures are
    reported by return values (or the ``on_error`` continuation of
    ``cast_vote``), never by raising.

    Instances are not thread-safe; guard shared use with a lock.

    Example:
        >>> election = ElectionRegistry([
        ...     Candidate(id="C1", name="Sarpanch Ram", party="Janata"),
        ...     Candidate(id="C2", name="Pradhan Sita", party="Lok"),
        ... ])
        >>> election.register_voter({"id": "V1", "name": "Mohan", "age": 25})
        True
        >>> election.cast_vote("V1", "C1", lambda vote: "voted!", lambda reason: reason)
        'voted!'
    """

    __slots__ = ("_candidates", "_voters", "_votes")

    def __init__(self, candidates: Iterable[Candidate | Mapping[str, Any]]):
        self._candidates: tuple[Candidate, ...] = tuple(
            c if isinstance(c, Candidate) else Candidate.from_dict(c) for c in candidates
        )
        if not self._candidates:
            raise ValueError("An election needs at least one candidate")
        self._voters: dict[str, Voter] = {}
        self._votes: list[Vote] = []

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._candidates

    @property
    def votes_cast(self) -> int:
        return len(self._votes)

    def is_registered(self, voter_id: str) -> bool:
        return isinstance(voter_id, str) and voter_id in self._voters

    def has_voted(self, voter_id: str) -> bool:
        return any(vote.voter_id == voter_id for vote in self._votes)

    def _find_candidate(self, candidate_id: str) -> Candidate | None:
        return next((c for c in self._candidates if c.id == candidate_id), None)

    def register_voter(self, voter: Voter | Mapping[str, Any] | None) -> bool:
        """Register a voter, returning whether they were accepted.

        A voter is refused if missing, if any of id, name or age is absent,
        if the id is not a string, if they are under the voting age, or if
        their id is already registered. A refused voter leaves the registry
        unchanged.
        """
        if voter is None:
            return False
        if isinstance(voter, Mapping):
            if any(key not in voter for key in VOTER_FIELDS):
                return False
            voter = Voter.from_dict(voter)
        elif not isinstance(voter, Voter):
            return False

        if not isinstance(voter.id, str):
            return False
        if not isinstance(voter.age, Real) or voter.age < VOTING_AGE:
            return False
        if voter.id in self._voters:
            return False

        self._voters[voter.id] = voter
        return True

    def cast_vote(
        self,
        voter_id: str,
        candidate_id: str,
        on_success: Callable[[Vote], T],
        on_error: Callable[[str], T],
    ) -> T:
        """Cast a vote and hand the outcome to one of two continuations.

        The voter must be registered, the candidate must exist and the voter
        must not have voted before. On success the vote is recorded and
        ``on_success`` is called with it; otherwise ``on_error`` is called
        with a reason. Either way the continuation runs before this returns
        and its return value is passed through.
        """
        if not self.is_registered(voter_id):
            return on_error(f"voter {voter_id} is not registered")
        if self._find_candidate(candidate_id) is None:
            return on_error(f"unknown candidate {candidate_id}")
        if self.has_voted(voter_id):
            return on_error(f"voter {voter_id} has already voted")

        vote = Vote(voter_id=voter_id, candidate_id=candidate_id)
        self._votes.append(vote)
        return on_success(vote)

    def get_results(self, comparator: Comparator | None = None) -> list[Result]:
        """Return one Result per candidate.

        Args:
            comparator: Optional ``cmp(a, b) -> int`` ordering (negative if
                ``a`` comes first). Without one, results are ordered by votes
                descending, ties keeping candidate order.
        """
        tally = tally_votes(self._votes)
        results = [Result.for_candidate(c, tally.get(c.id, 0)) for c in self._candidates]

        if comparator is not None:
            return sorted(results, key=cmp_to_key(comparator))
        # sorted() is stable, also with reverse=True
        return sorted(results, key=lambda r: r.votes, reverse=True)

    def get_winner(self) -> Candidate | None:
        """Return the candidate with the most votes, or None if nobody voted.

        Ties go to the candidate listed first.
        """
        if not self._votes:
            return None
        # max() keeps the first of equal maxima
        top = max(self.get_results(), key=lambda r: r.votes)
        return self._find_candidate(top.id)


def create_election(candidates: Iterable[Candidate | Mapping[str, Any]]) -> ElectionRegistry:
    """Create an independent election over ``candidates``."""
    return ElectionRegistry(candidates)
