"""
Instance registry.

Each instance is a dict describing a ready-made cover problem:
    make_cover:   () -> Cover
    description:  str
"""

from .basic import make_basic_cover
from .seven_segment import make_seven_segment_cover, SEVEN_SEGMENT_TABLES
from .logic import make_cyclic_logic_cover, make_majority_logic_cover
from .suites import make_test_suite_cover


INSTANCES = {
    "tautology": {
        "make_cover":  lambda: make_basic_cover("tautology"),
        "description": "One subset covering one element: trivially essential",
    },
    "disjoint": {
        "make_cover":  lambda: make_basic_cover("disjoint"),
        "description": "Two subsets sharing nothing: both essential",
    },
    "domination": {
        "make_cover":  lambda: make_basic_cover("domination"),
        "description": "B covers a strict superset of A: A is dropped",
    },
    "tie": {
        "make_cover":  lambda: make_basic_cover("tie"),
        "description": "A and B cover the same element: two minimum covers",
    },
    "cyclic": {
        "make_cover":  lambda: make_basic_cover("cyclic"),
        "description": "Six-cycle of pairs: no reduction applies, search only",
    },
    "logic_cyclic": {
        "make_cover":  make_cyclic_logic_cover,
        "description": "Quine-McCluskey primes of a cyclic 3-variable function",
    },
    "logic_majority": {
        "make_cover":  make_majority_logic_cover,
        "description": "Quine-McCluskey primes of 3-input majority: all essential",
    },
    "test_suite": {
        "make_cover":  make_test_suite_cover,
        "description": "Smallest test suites exercising every requirement",
    },
}

for _segment, _table in SEVEN_SEGMENT_TABLES.items():
    INSTANCES[f"seven_segment_{_segment}"] = {
        "make_cover":  lambda segment=_segment: make_seven_segment_cover(segment),
        "description": f"Seven-segment decoder, segment {_segment}: {_table['description']}",
    }
