"""
Reduction rules for the working snapshot.

Two rules, each able to trigger the other:

    domination:  if every element of b is also in a, and a covers more,
                 b is never needed -- any cover using b can use a instead.
                 Removing b may leave some element with a single coverer.

    essential:   if an element is covered by exactly one subset, that
                 subset is in every cover. It moves to state.essential and
                 the elements it covers leave the snapshot.
                 Shrinking subsets may make one dominate another.

simplify alternates them until neither applies.
"""

from .state import CoverState, Incidence


def dominates(incidence: Incidence, a, b) -> bool:
    """
    Does a dominate b? True iff b's elements are a proper subset of a's.

    Identical coverage is not domination: with a tie, removing either one
    would be arbitrary and removing both would be wrong.
    """
    return incidence.subsets[b] < incidence.subsets[a]


def reduce_subsets(state: CoverState, verbose: bool = False) -> bool:
    """
    Remove every dominated subset from the snapshot.

    Returns True if anything was removed. Afterwards no remaining subset
    dominates another.
    """
    incidence = state.incidence
    removed = False
    for a in list(incidence.subsets):
        if a not in incidence.subsets:
            continue
        for b in list(incidence.subsets):
            if a == b or not dominates(incidence, a, b):
                continue
            incidence.remove_subset(b)
            removed = True
            state.step += 1
            state.history.append({
                "step": state.step,
                "rule": "dominated",
                "subset": b,
                "by": a,
            })
            if verbose:
                print(f"  [dominated] {b} by {a}")
    return removed


def reduce_elements(state: CoverState, verbose: bool = False) -> bool:
    """
    Move every essential subset into state.essential and drop the
    elements it covers.

    Returns True if any element was removed. Afterwards every remaining
    element is covered by at least two subsets.
    """
    incidence = state.incidence
    removed = False
    for e in list(incidence.elements):
        if incidence.element_degree(e) != 1:
            continue
        (s,) = incidence.elements[e]
        covered = list(incidence.subsets[s])
        for ee in covered:
            incidence.remove_element(ee)
        incidence.remove_subset(s)
        state.essential.append(s)
        removed = True
        state.step += 1
        state.history.append({
            "step": state.step,
            "rule": "essential",
            "subset": s,
            "element": e,
            "covered": covered,
        })
        if verbose:
            print(f"  [essential] {s} (sole cover of {e}, covers {len(covered)})")
    return removed


def simplify(state: CoverState, verbose: bool = False) -> bool:
    """
    Apply both reductions until neither makes progress.

    Returns True if the essential subsets cover every element by
    themselves, in which case they are the only minimum cover.
    Stores the answer in state.unique as well.
    """
    reduce_subsets(state, verbose=verbose)
    while True:
        found_essential = reduce_elements(state, verbose=verbose)
        found_dominated = reduce_subsets(state, verbose=verbose)
        if not (found_essential or found_dominated):
            break
    state.unique = state.is_covered
    if verbose:
        print(f"  Essential: {len(state.essential)} | "
              f"Residual: {len(state.incidence.subsets)} subsets, "
              f"{len(state.incidence.elements)} elements")
    return state.unique
