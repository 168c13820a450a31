import numpy as np

from constants.params import RADIX_BASE, DEMO_SORTED_ARRAY


def get_digit(value, exp):
    """Returns the decimal digit of value at place exp (1, 10, 100, ...)."""
    return (int(value) // exp) % RADIX_BASE


def count_passes(max_value):
    """Number of bucket passes needed for a sequence whose maximum is max_value."""
    passes = 0
    exp = 1
    while max_value // exp > 0:
        passes += 1
        exp *= RADIX_BASE
    return passes


def bucket_pass(arr, exp):
    """
    Distributes arr into ten digit buckets and collects them back in order.
    Equal digits keep their relative order, so the pass is stable.
    """
    buckets = [[] for _ in range(RADIX_BASE)]
    for value in arr:
        buckets[get_digit(value, exp)].append(value)

    output = []
    for bucket in buckets:
        output.extend(bucket)
    return output


def _validate(arr):
    if isinstance(arr, np.ndarray):
        if arr.ndim != 1:
            raise TypeError("Input must be a one-dimensional array.")
        if arr.dtype.kind not in "iu":
            raise TypeError(f"Input array must have an integer dtype, got {arr.dtype}.")
        if arr.size > 0 and np.min(arr) < 0:
            raise ValueError("Input array contains negative numbers, cannot use radix sort.")
        return

    if not isinstance(arr, list):
        raise TypeError("Input must be a list or a NumPy array.")
    for value in arr:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"Radix sort only supports integers, got {type(value).__name__}.")
        if value < 0:
            raise ValueError("Input array contains negative numbers, cannot use radix sort.")


def radix_sort_passes(arr):
    """
    Validates arr, then returns a generator that sorts it in place, least
    significant digit first, yielding (exp, snapshot) after every pass.
    Passes run as the generator is consumed; there is one per decimal
    digit of the maximum value.
    """
    _validate(arr)
    return _sort_passes(arr)


def _sort_passes(arr):
    if len(arr) == 0:
        return

    max_value = int(max(arr))
    exp = 1
    while max_value // exp > 0:
        arr[:] = bucket_pass(arr, exp)
        yield exp, list(arr)
        exp *= RADIX_BASE


def radix_sort(arr):
    """Performs LSD Radix Sort in place and returns arr."""
    for _ in radix_sort_passes(arr):
        pass
    return arr


# Example usage
if __name__ == "__main__":
    arr = np.random.permutation(DEMO_SORTED_ARRAY).tolist()
    print(arr)
    radix_sort(arr)
    print(arr)
    print("Radix sort complete.")
