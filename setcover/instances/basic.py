"""
Instances: small textbook cases, one per behaviour of the solver.

    tautology:   one subset, one element, both the value True
    disjoint:    two subsets, nothing shared -- both essential
    domination:  B covers strictly more than A, so A is dropped
    tie:         A and B cover the same element -- two answers
    cyclic:      every element covered twice, all subsets the same
                 size: no reduction applies and search does all the work
"""

from ..core.cover import Cover


BASIC_TABLES = {
    "tautology": {
        True: [True],
    },
    "disjoint": {
        "A": ["x"],
        "B": ["y"],
    },
    "domination": {
        "A": ["x"],
        "B": ["x", "y", "z"],
    },
    "tie": {
        "A": ["x"],
        "B": ["x"],
    },
    "cyclic": {
        "A": ["u", "v"],
        "B": ["v", "w"],
        "C": ["w", "x"],
        "D": ["x", "y"],
        "E": ["y", "z"],
        "F": ["z", "u"],
    },
}


def make_table_cover(table: dict) -> Cover:
    """Build a Cover from a {subset: elements} table."""
    cover = Cover()
    for subset, elements in table.items():
        cover.add(subset, elements)
    return cover


def make_basic_cover(name: str) -> Cover:
    if name not in BASIC_TABLES:
        raise ValueError(
            f"Unknown instance: {name!r}. "
            f"Choose from: {list(BASIC_TABLES.keys())}"
        )
    return make_table_cover(BASIC_TABLES[name])
