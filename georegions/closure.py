"""Descendant and ancestor closures over the containment table."""

__all__ = ["descendants", "descendant_closure", "ancestors", "common_ancestors"]

from collections import defaultdict
from functools import cache, reduce
from typing import Iterable

from georegions.tables import CONTAINMENT


def _parent_index(table: dict[str, frozenset[str]]) -> dict[str, frozenset[str]]:
    """Invert the containment table into a child to parents mapping."""
    index: dict[str, set[str]] = defaultdict(set)
    for parent, children in table.items():
        for child in children:
            index[child].add(parent)

    return {child: frozenset(parents) for child, parents in index.items()}


PARENTS: dict[str, frozenset[str]] = _parent_index(CONTAINMENT)
"""Immediate parents of every code that has one."""


@cache
def descendants(code: str) -> frozenset[str]:
    """Return the code together with every code it transitively contains.

    Codes that are not keys of the containment table are leaves and contribute only themselves.

    Args:
        code (str): A normalised code.

    Returns:
        frozenset[str]: The self-or-descendant set of the code.

    """
    found = {code}
    for child in CONTAINMENT.get(code, ()):
        found.update(descendants(child))

    return frozenset(found)


def descendant_closure(codes: Iterable[str]) -> frozenset[str]:
    """Return the union of the descendant sets of the given codes.

    Args:
        codes (Iterable[str]): Normalised seed codes.

    Returns:
        frozenset[str]: Every seed plus every code reachable from a seed.

    """
    return frozenset().union(*(descendants(code) for code in codes))


@cache
def ancestors(code: str) -> frozenset[str]:
    """Return the code together with every code that transitively contains it.

    A code reachable through several containment paths, e.g. a member of the European Union that is
    also part of a geographic subregion, reaches shared ancestors more than once; the result is a
    set so each ancestor is reported once.

    Args:
        code (str): A normalised code.

    Returns:
        frozenset[str]: The self-or-ancestor set of the code.

    """
    found = {code}
    for parent in PARENTS.get(code, ()):
        found.update(ancestors(parent))

    return frozenset(found)


def common_ancestors(codes: Iterable[str]) -> frozenset[str]:
    """Return the codes that are a self-or-ancestor of every given code.

    Args:
        codes (Iterable[str]): Normalised codes.

    Returns:
        frozenset[str]: The intersection of the ancestor sets. Empty if no codes are given.

    """
    sets = [ancestors(code) for code in codes]
    if not sets:
        return frozenset()

    return reduce(frozenset.intersection, sets)
