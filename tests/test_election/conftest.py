"""Shared fixtures for election tests."""

import pytest
from tests.conftest import cast, make_election


@pytest.fixture
def village():
    """Three candidates, five registered adult voters, nobody has voted."""
    return make_election(
        {"C1": "Janata", "C2": "Lok", "C3": "Kisan"},
        {"V1": 25, "V2": 40, "V3": 18, "V4": 67, "V5": 33},
    )


@pytest.fixture
def clear_winner(village):
    """C2 leads with 3 votes, C1 has 1 and C3 has 1.

         V1  V2  V3  V4  V5
    C1    x
    C2        x   x       x
    C3                x
    """
    cast(village, {"V1": "C1", "V2": "C2", "V3": "C2", "V4": "C3", "V5": "C2"})
    return village


@pytest.fixture
def three_way_tie(village):
    """C3, C1 and C2 each get one vote (cast in that order); V4, V5 abstain."""
    cast(village, {"V1": "C3", "V2": "C1", "V3": "C2"})
    return village
