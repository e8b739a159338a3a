"""
setcover: exact minimum set cover by reduction and exhaustive search.

Record which elements each subset covers, then ask for every combination
of the fewest subsets covering all elements. Dominated subsets are
dropped and essential subsets extracted until nothing more can be
decided; whatever is left is settled by trying selections of increasing
width.

Usage:
    python -m setcover --instance seven_segment_a
    python -m setcover --instance cyclic
    python -m setcover --subset A=x --subset B=x,y,z
    python -m setcover --list
"""

from .core.state import Incidence, CoverState
from .core.reduce import dominates, reduce_subsets, reduce_elements, simplify
from .core.search import next_selection, search_covers
from .core.cover import Cover, run_minimize
from .instances.logic import prime_implicants, make_logic_cover, minimal_sums

__all__ = [
    "Incidence", "CoverState",
    "dominates", "reduce_subsets", "reduce_elements", "simplify",
    "next_selection", "search_covers",
    "Cover", "run_minimize",
    "prime_implicants", "make_logic_cover", "minimal_sums",
]
