"""Vote counting over nested regions."""

from collections.abc import Mapping
from typing import Any

from panchayat.models import Region


class RegionError(ValueError):
    """Raised when a region in the tree does not carry a whole vote count."""
    pass


def _fields(node: Region | Mapping[str, Any]) -> tuple[Any, Any, Any]:
    if isinstance(node, Region):
        return node.name, node.votes, node.sub_regions
    return node.get("name"), node.get("votes"), node.get("sub_regions")


def count_votes_in_regions(region_tree: Region | Mapping[str, Any] | None) -> int:
    """Count the votes in a region and all of its sub-regions.

    The tree may be built from Region objects or from nested mappings with
    ``name``, ``votes`` and an optional ``sub_regions`` list. Anything else
    (including None) counts as 0. A leaf (no ``sub_regions``) contributes
    only its own votes.

    The tree is walked depth-first with an explicit stack, so deep trees
    don't hit the recursion limit.

    Raises:
        RegionError: If a region's ``votes`` is missing or not an integer
    """
    total = 0
    stack = [region_tree]
    while stack:
        node = stack.pop()
        if not isinstance(node, (Region, Mapping)):
            continue

        name, votes, sub_regions = _fields(node)
        if not isinstance(votes, int) or isinstance(votes, bool):
            raise RegionError(f"Region {name!r} has no vote count (got {votes!r})")
        total += votes

        if sub_regions is not None:
            # reversed keeps the children in document order when popped
            stack.extend(reversed(sub_regions))

    return total
