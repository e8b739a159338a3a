"""
Exhaustive search over what the reducer could not decide.

Selections of residual subsets are encoded as boolean inclusion masks
and visited width by width: every 1-subset selection, then every
2-subset selection, and so on. The first width that covers all
residual elements is the minimum; every cover of that width is kept.

The work is exponential in the number of residual subsets. There is
no cutoff: the answer is always exact.
"""

from .state import CoverState


def next_selection(mask: list) -> bool:
    """
    Advance mask in place to the next selection with the same number of
    True entries, in lexicographic order with True before False.

    Knuth's Algorithm L restricted to booleans. Starting from
    [True]*w + [False]*(n-w), repeated calls visit every w-of-n
    selection exactly once. Returns False (leaving mask unchanged)
    once the last selection has been reached.
    """
    if len(mask) < 2:
        return False
    j = len(mask) - 2
    while not mask[j] or mask[j + 1]:
        if j == 0:
            return False
        j -= 1
    l = len(mask) - 1
    while mask[l]:
        l -= 1
    mask[j], mask[l] = mask[l], mask[j]
    mask[j + 1:] = reversed(mask[j + 1:])
    return True


def search_covers(state: CoverState, verbose: bool = False) -> list:
    """
    Complete the essential subsets into every minimum cover.

    Residual subsets are tried largest first. Larger subsets are more
    likely to show up in small covers, so the minimum width tends to
    be reached sooner. The order never changes which covers are found.

    Returns a list of covers, each a list of subsets starting with
    state.essential. Empty only if some residual element has no
    coverer, which a snapshot of a Cover never contains.
    """
    incidence = state.incidence
    residual = sorted(incidence.subsets, key=incidence.subset_degree, reverse=True)
    to_cover = set(incidence.elements)

    covers = []
    for width in range(1, len(residual) + 1):
        mask = [i < width for i in range(len(residual))]
        tried = 0
        while True:
            tried += 1
            chosen = [s for s, included in zip(residual, mask) if included]
            covered = set()
            for s in chosen:
                covered |= incidence.subsets[s]
            if to_cover <= covered:
                covers.append(state.essential + chosen)
            if not next_selection(mask):
                break
        if verbose:
            print(f"  [search] width {width}: {tried} selections tried, "
                  f"{len(covers)} covers found")
        if covers:
            break
    return covers
