"""
Reporting utilities.
"""

from .core.state import CoverState, Incidence


def print_incidence(incidence: Incidence, title: str = "Subsets"):
    """Print every subset with the elements it covers."""
    print(f"\n{'='*60}")
    print(f"{title} ({len(incidence.subsets)}) over "
          f"{len(incidence.elements)} elements:")
    for s, es in incidence.subsets.items():
        covered = ", ".join(str(e) for e in sorted(es, key=str))
        print(f"  {s}: {{{covered}}}")
    print(f"{'='*60}")


def print_history(state: CoverState):
    """Print the reductions applied to a snapshot."""
    print(f"\n{'='*60}")
    print("Reduction history:")
    print(f"{'='*60}")
    if not state.history:
        print("  (no reductions applied)")
    for entry in state.history:
        if entry["rule"] == "dominated":
            print(f"  Step {entry['step']}: {entry['subset']} dominated by {entry['by']}")
        else:
            print(f"  Step {entry['step']}: {entry['subset']} essential "
                  f"(sole cover of {entry['element']})")
    if state.unique:
        print("  Essential subsets cover everything: the cover is unique.")
    elif state.unique is False:
        print(f"  Residual: {len(state.incidence.subsets)} subsets, "
              f"{len(state.incidence.elements)} elements -> search")


def print_covers(covers: list):
    """Print every minimum cover found."""
    print(f"\n{'='*60}")
    width = len(covers[0]) if covers else 0
    print(f"MINIMUM COVERS: {len(covers)} of width {width}")
    print(f"{'='*60}")
    for i, c in enumerate(covers):
        print(f"  {i+1}. " + ", ".join(str(s) for s in c))
    print(f"{'='*60}")
