"""Tests for recursive region vote counting."""

import pytest

from panchayat.models import Region
from panchayat.regions import RegionError, count_votes_in_regions


class TestCountVotesInRegions:
    def test_nested_tree(self):
        """R(5) + r1(3, leaf) + r2(2, no children) = 10."""
        tree = Region("R", 5, [Region("r1", 3), Region("r2", 2, [])])
        assert count_votes_in_regions(tree) == 10

    def test_deep_tree(self):
        """
        District 10
        ├── Block A 4
        │   ├── Village 1  7
        │   └── Village 2  1
        └── Block B 0
            └── Village 3 0
                └── Hamlet 2
        """
        tree = Region("District", 10, [
            Region("Block A", 4, [Region("Village 1", 7), Region("Village 2", 1)]),
            Region("Block B", 0, [Region("Village 3", 0, [Region("Hamlet", 2)])]),
        ])
        assert count_votes_in_regions(tree) == 24

    def test_leaf(self):
        assert count_votes_in_regions(Region("Ward", 42)) == 42

    @pytest.mark.parametrize("value", [None, "R", 5, ["R", 5]])
    def test_not_a_region(self, value):
        assert count_votes_in_regions(value) == 0

    def test_leaf_without_votes(self):
        with pytest.raises(RegionError, match="Ward"):
            count_votes_in_regions(Region("Ward"))

    def test_child_without_votes(self):
        tree = Region("R", 5, [Region("r1", 3), Region("r2")])
        with pytest.raises(RegionError, match="r2"):
            count_votes_in_regions(tree)

    def test_from_dict(self):
        tree = Region.from_dict({
            "name": "R",
            "votes": 5,
            "sub_regions": [{"name": "r1", "votes": 3}, {"name": "r2", "votes": 2, "sub_regions": []}],
        })
        assert tree.sub_regions[0].sub_regions is None
        assert tree.sub_regions[1].sub_regions == []
        assert count_votes_in_regions(tree) == 10

    def test_mapping_tree(self):
        """Nested mappings are counted the same as Region objects."""
        tree = {
            "name": "R",
            "votes": 5,
            "sub_regions": [{"name": "r1", "votes": 3}, {"name": "r2", "votes": 2, "sub_regions": []}],
        }
        assert count_votes_in_regions(tree) == 10

    def test_mapping_leaf_without_votes(self):
        with pytest.raises(RegionError, match="r1"):
            count_votes_in_regions({"name": "R", "votes": 5, "sub_regions": [{"name": "r1"}]})

    def test_mixed_tree(self):
        tree = Region("R", 1, [{"name": "r1", "votes": 2}, Region("r2", 3)])
        assert count_votes_in_regions(tree) == 6

    def test_very_deep_tree(self):
        """A chain far deeper than the recursion limit, one vote per level."""
        tree = Region("leaf", 1)
        for level in range(10_000):
            tree = Region(f"level {level}", 1, [tree])
        assert count_votes_in_regions(tree) == 10_001

    def test_does_not_mutate(self):
        tree = Region("R", 5, [Region("r1", 3)])
        before = tree.to_dict()
        count_votes_in_regions(tree)
        assert tree.to_dict() == before
