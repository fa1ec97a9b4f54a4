"""Core data models for candidates, voters, votes and results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self


@dataclass(frozen=True)
class Candidate:
    """A candidate standing in an election.

    Attributes:
        id: Unique candidate identifier
        name: Display name
        party: Party the candidate stands for

    Example:
        >>> Candidate(id="C1", name="Sarpanch Ram", party="Janata")
    """
    id: str
    name: str
    party: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "party": self.party}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a Candidate from a mapping with id, name and party keys.

        Raises:
            KeyError: If any of the keys is missing
        """
        return cls(id=data["id"], name=data["name"], party=data["party"])


@dataclass(frozen=True)
class Voter:
    """A person who may register to vote."""
    id: str
    name: str
    age: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "age": self.age}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(id=data["id"], name=data["name"], age=data["age"])


@dataclass(frozen=True)
class Vote:
    """A single cast vote. A voter has at most one."""
    voter_id: str
    candidate_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"voter_id": self.voter_id, "candidate_id": self.candidate_id}


@dataclass
class Result:
    """A candidate's standing, derived from the votes cast so far.

    Attributes:
        id: Candidate identifier
        name: Candidate name
        party: Candidate party
        votes: Number of votes the candidate received
    """
    id: str
    name: str
    party: str
    votes: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "party": self.party, "votes": self.votes}

    @classmethod
    def for_candidate(cls, candidate: Candidate, votes: int) -> Self:
        return cls(id=candidate.id, name=candidate.name, party=candidate.party, votes=votes)


@dataclass
class Region:
    """A node in a nested tree of voting regions.

    A region with ``sub_regions`` set to None is a leaf. An empty list is an
    internal node that happens to have no children; both count only their
    own votes.

    Example:
        >>> Region("District", 5, [Region("Ward 1", 3), Region("Ward 2", 2, [])])
    """
    name: str
    votes: int | None = None
    sub_regions: list["Region"] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "votes": self.votes}
        if self.sub_regions is not None:
            data["sub_regions"] = [r.to_dict() for r in self.sub_regions]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build a region tree from nested mappings.

        The ``sub_regions`` key is optional; its absence makes a leaf.
        """
        sub_regions = data.get("sub_regions")
        return cls(
            name=data["name"],
            votes=data.get("votes"),
            sub_regions=None if sub_regions is None else [cls.from_dict(r) for r in sub_regions],
        )


@dataclass(frozen=True)
class ValidationRules:
    """Rules applied by a voter validator.

    Attributes:
        min_age: Minimum age a voter must have
        required_fields: Fields that must be present on the voter, checked in order
    """
    min_age: int = 18
    required_fields: tuple[str, ...] = ("id", "name", "age")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        return cls(
            min_age=data["min_age"],
            required_fields=tuple(data["required_fields"]),
        )


@dataclass
class ValidationResult:
    """Outcome of validating a voter.

    ``reason`` names the last missing required field, or is empty.
    """
    valid: bool
    reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "reason": self.reason}


@dataclass(frozen=True)
class Color:
    """An RGB color with channels in the range 0-255."""
    name: str
    r: int
    g: int
    b: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True)
class Festival:
    """A festival on the calendar. ``date`` is an ISO "YYYY-MM-DD" string."""
    name: str
    date: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "date": self.date, "type": self.type}


@dataclass
class ElectionReport:
    """Outcome of running a whole election document.

    Attributes:
        name: Name of the election
        results: Candidate standings, most votes first
        winner: Winning candidate, or None if no votes were accepted
        rejected_voters: Identifiers (or positions) of voters refused registration
        rejected_votes: Rejection reasons for votes that were not counted
    """
    name: str
    results: list[Result]
    winner: Candidate | None
    rejected_voters: list[str] = field(default_factory=list)
    rejected_votes: list[str] = field(default_factory=list)

    @property
    def votes_counted(self) -> int:
        return sum(r.votes for r in self.results)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.name,
            "results": [r.to_dict() for r in self.results],
            "winner": None if self.winner is None else self.winner.to_dict(),
            "votes_counted": self.votes_counted,
            "rejected_voters": self.rejected_voters,
            "rejected_votes": self.rejected_votes,
        }
