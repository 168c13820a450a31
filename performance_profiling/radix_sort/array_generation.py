import os
import argparse

import numpy as np

from constants.params import MAX_ARRAY_VALUE, RANDOM_SEED

ARRAYS_FILE_NAME = "pre_generated_arrays.npz"


def generate_array(size, seed, max_value=MAX_ARRAY_VALUE):
    """Generates one seeded array of non-negative integers as a Python list."""
    rng = np.random.RandomState(seed)
    return rng.randint(0, max_value, size=size).tolist()


def generate_random_arrays(size, num_arrays=10, max_value=MAX_ARRAY_VALUE, seed=RANDOM_SEED):
    """Generates multiple random arrays for sorting benchmarking."""
    rng = np.random.RandomState(seed)
    arrays = [rng.randint(0, max_value, size) for _ in range(num_arrays)]
    return np.array(arrays)


def save_arrays(size, num_arrays=10, output_dir="performance_profiling/radix_sort/"):
    """Saves generated arrays to a .npz file and returns its path."""
    os.makedirs(output_dir, exist_ok=True)

    arrays = generate_random_arrays(size, num_arrays)
    file_path = os.path.join(output_dir, ARRAYS_FILE_NAME)
    np.savez(file_path, arrays=arrays)

    print(f"Info: Generated {num_arrays} random arrays of size {size}.")
    return file_path


def load_arrays(file_path):
    """Loads pre-generated arrays back as lists of Python ints."""
    with np.load(file_path) as data:
        return [row.tolist() for row in data["arrays"]]


def run_array_generation(size=1000, num_arrays=10):
    """Runs the array generation process."""
    return save_arrays(size, num_arrays)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Pre-generates arrays for radix sort profiling.")
    parser.add_argument("--size", type=int, default=1000, help="Number of elements per array.")
    parser.add_argument("--num_arrays", type=int, default=10, help="Number of arrays to generate.")
    args = parser.parse_args()

    run_array_generation(size=args.size, num_arrays=args.num_arrays)
