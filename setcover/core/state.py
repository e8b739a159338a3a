"""
Core data structures: Incidence, CoverState.

These are the atoms of the whole system. Nothing in here knows about
domination, essential subsets or search.

Subsets and elements are opaque hashable values:
    Subsets:   anything hashable -- "0-1-", ("test", 3), True
    Elements:  anything hashable -- 7, "x", frozenset({1, 2})

    A subset and an element may be equal values without colliding:
    they live on different sides of the relation.

The incidence relation is stored twice, once per direction, and the
two directions always agree:

    e in incidence.subsets[s]   <=>   s in incidence.elements[e]

A node with no edges is never stored. Removing the last element of a
subset removes the subset, and vice versa.
"""

from dataclasses import dataclass, field
from collections.abc import Hashable
from typing import Dict, Generic, List, Optional, Set, TypeVar

S = TypeVar("S", bound=Hashable)  # subsets
E = TypeVar("E", bound=Hashable)  # elements


@dataclass
class Incidence(Generic[S, E]):
    """
    Bipartite relation between subsets and the elements they cover.

    subsets:   subset  -> set of elements it covers
    elements:  element -> set of subsets covering it

    Both outer dicts keep insertion order, so iterating over them is
    reproducible from run to run even for string keys.
    """
    subsets: Dict[S, Set[E]] = field(default_factory=dict)
    elements: Dict[E, Set[S]] = field(default_factory=dict)

    def add(self, s: S, e: E):
        self.subsets.setdefault(s, set()).add(e)
        self.elements.setdefault(e, set()).add(s)

    def remove_subset(self, s: S):
        """Remove s and every edge touching it. No-op if s is absent."""
        for e in self.subsets.pop(s, ()):
            covering = self.elements[e]
            covering.discard(s)
            if not covering:
                del self.elements[e]

    def remove_element(self, e: E):
        """Remove e and every edge touching it. No-op if e is absent."""
        for s in self.elements.pop(e, ()):
            covered = self.subsets[s]
            covered.discard(e)
            if not covered:
                del self.subsets[s]

    def adjacent(self, s: S, e: E) -> bool:
        return e in self.subsets.get(s, ())

    def subset_degree(self, s: S) -> int:
        return len(self.subsets.get(s, ()))

    def element_degree(self, e: E) -> int:
        return len(self.elements.get(e, ()))

    def copy(self) -> "Incidence[S, E]":
        """A value copy: no set is shared with self."""
        return Incidence(
            subsets={s: set(es) for s, es in self.subsets.items()},
            elements={e: set(ss) for e, ss in self.elements.items()},
        )

    def __len__(self):
        return sum(len(es) for es in self.subsets.values())

    def __bool__(self):
        return bool(self.subsets)

    def __repr__(self):
        return f"Incidence({len(self.subsets)} subsets, {len(self.elements)} elements)"


@dataclass
class CoverState(Generic[S, E]):
    """
    Working snapshot of one minimization run.

    incidence:  subsets not yet found essential or dominated, and
                elements not yet covered by an essential subset
    essential:  subsets that appear in every minimum cover, in the
                order they were found
    history:    log of every reduction applied
    unique:     set by simplify: True if the essential subsets alone
                cover everything, None before simplification
    """
    incidence: Incidence[S, E] = field(default_factory=Incidence)
    essential: List[S] = field(default_factory=list)
    history: list = field(default_factory=list)
    step: int = 0
    unique: Optional[bool] = None

    @property
    def residual_subsets(self) -> List[S]:
        return list(self.incidence.subsets)

    @property
    def residual_elements(self) -> List[E]:
        return list(self.incidence.elements)

    @property
    def is_covered(self) -> bool:
        return not self.incidence.elements
