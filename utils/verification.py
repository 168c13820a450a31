"""
Property checks for sort results.

The profiling harness uses these to confirm every run produced an ascending
permutation of its input, and to report where an unsorted result first
goes wrong.
"""

from collections import Counter


def is_sorted_ascending(xs):
    """Returns True iff xs[i] <= xs[i+1] for all i."""
    return first_order_violation(xs) is None


def first_order_violation(xs):
    """Returns the first index i where xs[i] > xs[i+1], or None if ascending."""
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a, b):
    """Returns True iff a and b hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(int(v) for v in a) == Counter(int(v) for v in b)
