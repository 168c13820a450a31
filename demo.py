import sys
import argparse

import numpy as np

from algorithms.radix_sort.single_threaded import radix_sort
from constants.params import DEMO_SORTED_ARRAY


def shuffle_array(values, seed=None):
    """Returns a shuffled copy of values; the input list is left untouched."""
    rng = np.random.RandomState(seed)
    return rng.permutation(values).tolist()


def format_array(values):
    return "[" + ", ".join(str(v) for v in values) + "]"


def run_demo(sorted_reference=DEMO_SORTED_ARRAY, seed=None):
    """
    Shuffles the reference array, sorts it back with radix sort and compares
    the result against the reference. Returns True when they match.
    """
    working = shuffle_array(sorted_reference, seed)

    print(f"Before sorting: {format_array(working)}")
    radix_sort(working)
    print(f" After sorting: {format_array(working)}")

    passed = working == list(sorted_reference)
    print("👍" if passed else "👎")
    return passed


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Radix sort demo on a small fixed array.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the shuffle, for a reproducible run."
    )
    args = parser.parse_args()

    sys.exit(0 if run_demo(seed=args.seed) else 1)
