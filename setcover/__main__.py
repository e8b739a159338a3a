"""
CLI entry point. Run as: python -m setcover --instance <name>
"""

import argparse

from .core.cover import Cover, run_minimize
from .visualization import print_incidence, print_history, print_covers
from .instances import INSTANCES
from .instances.seven_segment import run_seven_segment_suite, print_seven_segment_results


def parse_subset(arg: str) -> tuple:
    """Parse "NAME=e1,e2,..." into (NAME, [e1, e2, ...])."""
    name, sep, rest = arg.partition("=")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Expected NAME=e1,e2,... but got {arg!r}")
    elements = [e.strip() for e in rest.split(",") if e.strip()]
    return name, elements


def main(argv=None):
    parser = argparse.ArgumentParser(description="Exact minimum set cover")
    parser.add_argument(
        "--instance",
        choices=list(INSTANCES.keys()),
        default="seven_segment_a",
        help="Which built-in instance to minimize",
    )
    parser.add_argument("--subset", action="append", default=[], metavar="NAME=E1,E2",
                        help="Add a subset (repeatable); replaces --instance")
    parser.add_argument("--suite", action="store_true",
                        help="Run every seven-segment instance against its known covers")
    parser.add_argument("--list",  action="store_true", help="List instances and exit")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    args = parser.parse_args(argv)

    if args.list:
        for name, instance in INSTANCES.items():
            print(f"  {name:<18s} {instance['description']}")
        return

    # The suite checks its own answers -- it is not a single minimization.
    if args.suite:
        results = run_seven_segment_suite(verbose=not args.quiet)
        print_seven_segment_results(results)
        return

    # --- Build the cover ---
    if args.subset:
        cover = Cover()
        for arg in args.subset:
            try:
                name, elements = parse_subset(arg)
            except ValueError as e:
                parser.error(str(e))
            cover.add(name, elements)
        print("Instance: command line")
    else:
        cover = INSTANCES[args.instance]["make_cover"]()
        print(f"Instance: {args.instance}")
    print_incidence(cover.incidence)

    # --- Run ---
    state = cover.snapshot()
    try:
        covers = run_minimize(state, verbose=not args.quiet)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        print_history(state)
        return

    print_history(state)
    print_covers(covers)


if __name__ == "__main__":
    main()
