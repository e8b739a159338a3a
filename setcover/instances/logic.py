"""
Instances: two-level logic minimization (Quine-McCluskey).

A boolean function of n variables is given by the minterms where it is 1
and, optionally, don't-care minterms where either value is fine. Its
minimal sum-of-products forms are the minimum covers of the required
minterms by the function's prime implicants.

Cubes are strings over (x[n-1] ... x1 x0), most significant first:
    "0-1-"   ->  x3' x1         covers 2, 3, 6, 7
    "----"   ->  constant 1

Step 1 (prime_implicants) merges cubes that differ in exactly one fixed
position until nothing merges; whatever never merged is prime.
Step 2 (make_logic_cover) hands the primes to the set cover solver.
Don't-cares help merging but never need covering.
"""

from ..core.cover import Cover


def minterm_cube(m: int, n: int) -> str:
    return format(m, f"0{n}b") if n else ""


def merge_cubes(a: str, b: str):
    """The cube covering both a and b if they differ in one fixed position, else None."""
    diff = None
    for i, (x, y) in enumerate(zip(a, b)):
        if x == y:
            continue
        if x == "-" or y == "-" or diff is not None:
            return None
        diff = i
    if diff is None:
        return None
    return a[:diff] + "-" + a[diff + 1:]


def implicant_covers(cube: str, m: int) -> bool:
    """Does cube contain minterm m?"""
    bits = minterm_cube(m, len(cube))
    return all(c == "-" or c == b for c, b in zip(cube, bits))


def _check_function(n, minterms, dont_cares):
    if n < 0:
        raise ValueError(f"Number of variables must be >= 0, got {n}")
    for m in list(minterms) + list(dont_cares):
        if not 0 <= m < 2 ** n:
            raise ValueError(f"Minterm {m} out of range for {n} variables")
    both = set(minterms) & set(dont_cares)
    if both:
        raise ValueError(f"Minterms both required and don't-care: {sorted(both)}")


def prime_implicants(n: int, minterms, dont_cares=()) -> list:
    """
    All prime implicants of the function, sorted.

    Includes primes that only cover don't-cares; make_logic_cover drops
    those since they cover no required minterm.
    """
    minterms, dont_cares = list(minterms), list(dont_cares)
    _check_function(n, minterms, dont_cares)
    level = {minterm_cube(m, n) for m in set(minterms) | set(dont_cares)}
    primes = set()
    while level:
        # only cubes whose counts of 1s differ by one can merge
        groups = {}
        for c in level:
            groups.setdefault(c.count("1"), []).append(c)

        merged = set()
        next_level = set()
        for k, group in groups.items():
            for a in group:
                for b in groups.get(k + 1, ()):
                    c = merge_cubes(a, b)
                    if c is not None:
                        merged.add(a)
                        merged.add(b)
                        next_level.add(c)
        primes |= level - merged
        level = next_level
    return sorted(primes)


def make_logic_cover(n: int, minterms, dont_cares=()) -> Cover:
    """
    Cover problem for a boolean function: subsets are prime implicants,
    elements are the required minterms each one contains.
    """
    minterms, dont_cares = list(minterms), list(dont_cares)
    cover = Cover()
    for p in prime_implicants(n, minterms, dont_cares):
        cover.add(p, [m for m in sorted(set(minterms)) if implicant_covers(p, m)])
    return cover


def minimal_sums(n: int, minterms, dont_cares=(), verbose: bool = False) -> list:
    """
    Every minimum sum-of-products of the function, each a sorted list of cubes.

    A function with no minterms is constant 0: one empty sum.
    """
    covers = make_logic_cover(n, minterms, dont_cares).minimize(verbose=verbose)
    return sorted(sorted(c) for c in covers)


def cube_to_term(cube: str, names=None) -> str:
    """Render a cube as a product term: "0-1-" -> "x3'x1"."""
    n = len(cube)
    if names is None:
        names = [f"x{n - 1 - i}" for i in range(n)]
    literals = [
        name if c == "1" else f"{name}'"
        for c, name in zip(cube, names)
        if c != "-"
    ]
    return "".join(literals) or "1"


# Cyclic core: every minterm is covered by exactly two primes and no
# prime is essential, so the answer comes entirely from search.
CYCLIC_FUNCTION = {"n": 3, "minterms": [0, 1, 2, 5, 6, 7]}

# Majority of three inputs: three essential primes, no search needed.
MAJORITY_FUNCTION = {"n": 3, "minterms": [3, 5, 6, 7]}


def make_cyclic_logic_cover() -> Cover:
    return make_logic_cover(**CYCLIC_FUNCTION)


def make_majority_logic_cover() -> Cover:
    return make_logic_cover(**MAJORITY_FUNCTION)
