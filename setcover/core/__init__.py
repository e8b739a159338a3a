from .state import Incidence, CoverState
from .reduce import dominates, reduce_subsets, reduce_elements, simplify
from .search import next_selection, search_covers
from .cover import Cover, run_minimize

__all__ = [
    "Incidence", "CoverState",
    "dominates", "reduce_subsets", "reduce_elements", "simplify",
    "next_selection", "search_covers",
    "Cover", "run_minimize",
]
