"""
Instances: seven-segment decoder prime implicant tables.

Each table is the last step of minimizing one segment output of a 4-bit
seven-segment decoder: the prime implicants have already been found, and
what remains is picking the fewest of them that cover every minterm.

    subsets:   prime implicants as cube strings over (x3 x2 x1 x0),
               "-" marks a variable the implicant does not depend on
    elements:  the minterms (0..15) the implicant covers

Some segments reduce to a unique cover; others leave cyclic residues
that only search can settle, with several equally short answers.
"""

from ..core.cover import Cover


SEVEN_SEGMENT_TABLES = {
    "a": {
        "description": "Domination, then a cascade of essentials: unique cover of 6",
        "implicants": {
            "0-1-": [2, 3, 6, 7],
            "01-1": [5, 7],
            "-0-0": [0, 2, 8, 10],
            "--10": [2, 6, 10, 14],
            "-11-": [6, 7, 14, 15],
            "100-": [8, 9],
            "1--0": [8, 10, 12, 14],
            "11-0": [12, 14],
        },
        "covers": [
            ["0-1-", "01-1", "-0-0", "-11-", "100-", "1--0"],
        ],
    },
    "b": {
        "description": "Four essentials, then a tie on minterm 1: two covers of 5",
        "implicants": {
            "00--": [0, 1, 2, 3],
            "0-00": [0, 4],
            "0-11": [3, 7],
            "-00-": [0, 1, 8, 9],
            "-0-0": [0, 2, 8, 10],
            "1-01": [9, 13],
        },
        "covers": [
            ["0-00", "0-11", "-0-0", "1-01", "00--"],
            ["0-00", "0-11", "-0-0", "1-01", "-00-"],
        ],
    },
    "c": {
        "description": "Three essentials and two independent ties: four covers of 5",
        "implicants": {
            "0-0-": [0, 1, 4, 5],
            "0--1": [1, 3, 5, 7],
            "01--": [4, 5, 6, 7],
            "-00-": [0, 1, 8, 9],
            "-0-1": [1, 3, 9, 11],
            "--01": [1, 5, 9, 13],
            "10--": [8, 9, 10, 11],
        },
        "covers": [
            ["01--", "--01", "10--", "0-0-", "0--1"],
            ["01--", "--01", "10--", "0-0-", "-0-1"],
            ["01--", "--01", "10--", "-00-", "0--1"],
            ["01--", "--01", "10--", "-00-", "-0-1"],
        ],
    },
    "d": {
        "description": "Ten implicants collapse to a single cover of 5",
        "implicants": {
            "001-": [2, 3],
            "00-0": [0, 2],
            "0-10": [2, 6],
            "-000": [0, 8],
            "-011": [3, 11],
            "-101": [5, 13],
            "-110": [6, 14],
            "10-1": [9, 11],
            "1-0-": [8, 9, 12, 13],
            "1-01": [9, 13],
        },
        "covers": [
            ["-101", "-110", "00-0", "-011", "1-0-"],
        ],
    },
    "g": {
        "description": "Two essentials around a six-cycle: two covers of 5, alternating picks",
        "implicants": {
            "010-": [4, 5],
            "01-0": [4, 6],
            "--10": [2, 6, 10, 14],
            "-01-": [2, 3, 10, 11],
            "-101": [5, 13],
            "10--": [8, 9, 10, 11],
            "1--1": [9, 11, 13, 15],
            "1-1-": [10, 11, 14, 15],
        },
        "covers": [
            ["-01-", "10--", "010-", "--10", "1--1"],
            ["-01-", "10--", "01-0", "-101", "1-1-"],
        ],
    },
}


def make_seven_segment_cover(segment=None) -> Cover:
    """
    Set up the cover problem for one segment.

    Args:
        segment: key from SEVEN_SEGMENT_TABLES (default: "a")
    """
    if segment is None:
        segment = "a"
    if segment not in SEVEN_SEGMENT_TABLES:
        raise ValueError(
            f"Unknown segment: {segment!r}. "
            f"Choose from: {list(SEVEN_SEGMENT_TABLES.keys())}"
        )

    cover = Cover()
    for implicant, minterms in SEVEN_SEGMENT_TABLES[segment]["implicants"].items():
        cover.add(implicant, minterms)
    return cover


def run_seven_segment_suite(verbose=True) -> dict:
    """
    Minimize every segment and check it against the known covers.

    Returns dict: segment -> {solved, covers, expected, description}
    """
    results = {}
    for segment, table in SEVEN_SEGMENT_TABLES.items():
        if verbose:
            print(f"\n{'='*60}")
            print(f"SEGMENT: {segment}")
            print(f"  {table['description']}")
            print(f"{'='*60}")

        covers = make_seven_segment_cover(segment).minimize(verbose=verbose)
        expected = {frozenset(c) for c in table["covers"]}
        found = [frozenset(c) for c in covers]
        results[segment] = {
            "solved": len(found) == len(expected) and set(found) == expected,
            "covers": covers,
            "expected": table["covers"],
            "description": table["description"],
        }
    return results


def print_seven_segment_results(results: dict):
    """Pretty-print the seven-segment suite results."""
    print(f"\n{'='*60}")
    print("SEVEN-SEGMENT DECODER: Cover Suite Results")
    print(f"{'='*60}")
    all_solved = True
    for segment, r in results.items():
        status = "SOLVED" if r["solved"] else "MISMATCH"
        if not r["solved"]:
            all_solved = False
        print(f"  {segment}: {status:>8s} ({len(r['covers'])} covers)  {r['description']}")
    print(f"{'='*60}")
    if all_solved:
        print("  ALL SEGMENTS MATCH THEIR KNOWN MINIMUM COVERS.")
    else:
        print("  SOME SEGMENTS DIFFER. Check the implicant tables.")
    print(f"{'='*60}")
