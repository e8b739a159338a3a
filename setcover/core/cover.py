"""
The public solver: record subsets, then ask for every minimum cover.

    cover = Cover()
    cover.add("A", ["x"])
    cover.add("B", ["x", "y", "z"])
    cover.minimize()        # [["B"]]

The recorded relation is only ever read by minimize. Each call works on
its own snapshot, so minimize can be called again (or from several
threads, as long as nobody is adding at the same time).
"""

from typing import Generic, Iterable

from .state import CoverState, Incidence, S, E
from .reduce import simplify
from .search import search_covers


def run_minimize(state: CoverState, verbose: bool = False) -> list:
    """
    Minimize the snapshot held by state. state is consumed: afterwards it
    holds the residual problem, the essential subsets and the history.

    Returns every minimum cover as a list of subsets.
    """
    if simplify(state, verbose=verbose):
        return [list(state.essential)]
    return search_covers(state, verbose=verbose)


class Cover(Generic[S, E]):
    """Records subsets and the elements they cover."""

    def __init__(self):
        self.incidence: Incidence[S, E] = Incidence()

    def add(self, subset: S, elements: Iterable[E]):
        """
        Record that subset covers each of elements.

        Repeated calls accumulate. With no elements this is a no-op: a
        subset that covers nothing is never part of the model.
        """
        for e in elements:
            self.incidence.add(subset, e)

    def subsets(self) -> list:
        return list(self.incidence.subsets)

    def elements(self) -> list:
        return list(self.incidence.elements)

    def snapshot(self) -> CoverState:
        """A fresh working state sharing nothing with this cover."""
        return CoverState(incidence=self.incidence.copy())

    def minimize(self, verbose: bool = False) -> list:
        """
        Every minimum-length combination of subsets covering every element.

        Covers and the subsets inside them come in no particular order.
        The cost grows exponentially with whatever the reductions leave
        undecided.
        """
        return run_minimize(self.snapshot(), verbose=verbose)

    def __len__(self):
        return len(self.incidence)

    def __repr__(self):
        return f"Cover({len(self.incidence.subsets)} subsets, {len(self.incidence.elements)} elements)"
