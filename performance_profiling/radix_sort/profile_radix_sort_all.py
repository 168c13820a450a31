import os
import time
import traceback
import platform
import argparse

import numpy as np

from algorithms.radix_sort.single_threaded import radix_sort
from constants.params import RESULTS_BASE_PATH, RADIX_SORT_PATH, DATE_FORMAT, RANDOM_SEED, RUNS
from performance_profiling.radix_sort.array_generation import generate_array, load_arrays
from utils.utils import get_cpu_info, get_cpu_cores_info, get_ram_info
from utils.verification import is_sorted_ascending, is_permutation, first_order_violation

RESULTS_HEADER = "Run,Timestamp,Time(s),Size,MElements/s,Verified\n"


def numpy_sort(arr):
    return np.sort(np.asarray(arr, dtype=np.int64))


IMPL_CONFIG = {
    "lsd_radix_sort": {
        "file_suffix": 'lsd_radix_sort_stats.txt',
        "func": radix_sort,
        "is_baseline": False,
        "name_print": "CPU LSD Radix Sort (Decimal Buckets)",
        "returns_new_array": False
    },
    "python_sorted": {
        "file_suffix": 'python_sorted_stats.txt',
        "func": sorted,
        "is_baseline": True,
        "name_print": "Python built-in sorted()",
        "returns_new_array": True
    },
    "numpy_sort": {
        "file_suffix": 'numpy_sort_stats.txt',
        "func": numpy_sort,
        "is_baseline": True,
        "name_print": "NumPy np.sort",
        "returns_new_array": True
    }
}


def profile_and_save_stats(
        array_size: int,
        total_runs: int,
        run_baselines: bool = True,
        output_base: str = RESULTS_BASE_PATH,
        arrays_file: str = None
):
    size_str = f"S{array_size}"
    pre_generated = None
    if arrays_file:
        pre_generated = load_arrays(arrays_file)
        if not pre_generated or any(len(arr) != array_size for arr in pre_generated):
            raise ValueError(f"Arrays in {arrays_file} do not all have size {array_size}.")
        print(f"Info: Using {len(pre_generated)} pre-generated arrays from {arrays_file}.")

    print(f"\nInfo: Profiling Radix Sort for configuration: {size_str} (Size: {array_size:,})")
    print(f"Parameters: Runs={total_runs}")
    if not run_baselines:
        print("  NOTE: Baseline implementations (sorted, np.sort) will be SKIPPED.")

    output_dir = os.path.join(output_base, RADIX_SORT_PATH, str(array_size))
    os.makedirs(output_dir, exist_ok=True)

    file_handles = {}
    active_implementations_for_run = {}
    run_times = {}

    try:
        for key, config_item in IMPL_CONFIG.items():
            if config_item["is_baseline"] and not run_baselines:
                continue
            path = os.path.join(output_dir, config_item["file_suffix"])
            file_handles[key] = open(path, 'w')
            file_handles[key].write(RESULTS_HEADER)
            active_implementations_for_run[key] = config_item
            run_times[key] = []

        for run_number in range(1, total_runs + 1):
            print(f"  Starting Run {run_number}/{total_runs} for {size_str}...")
            if pre_generated is not None:
                arr_original = pre_generated[(run_number - 1) % len(pre_generated)]
            else:
                arr_original = generate_array(array_size, RANDOM_SEED + run_number)

            for impl_key, config_item in active_implementations_for_run.items():
                func_to_profile = config_item["func"]
                impl_name_print = config_item["name_print"]
                arr_input = list(arr_original)

                print(f"    Profiling {impl_name_print}...")
                try:
                    start_time = time.perf_counter()
                    result = func_to_profile(arr_input)
                    end_time = time.perf_counter()
                    exec_time = end_time - start_time

                    if not config_item["returns_new_array"]:
                        result = arr_input
                    verified = is_sorted_ascending(result) and is_permutation(arr_original, result)
                    if not verified:
                        violation = first_order_violation(result)
                        print(f"      Warning: {impl_name_print} result failed verification in run {run_number} "
                              f"(first order violation at index {violation}).")

                    melements_per_sec = 0.0
                    if exec_time > 0:
                        melements_per_sec = array_size / exec_time / 1e6

                    timestamp = time.strftime(DATE_FORMAT)
                    result_line = (f"{run_number},{timestamp},{exec_time:.6f},"
                                   f"{array_size},{melements_per_sec:.2f},{verified}\n")
                    file_handles[impl_key].write(result_line)
                    run_times[impl_key].append(exec_time)
                    print(
                        f"      {impl_name_print} Run {run_number}: {exec_time:.6f}s, "
                        f"MElements/s: {melements_per_sec:.2f}")

                except Exception as e:
                    print(f"      Error during {impl_name_print} profiling for run {run_number}: {e}")
                    traceback.print_exc()
                    timestamp = time.strftime(DATE_FORMAT)
                    file_handles[impl_key].write(f"{run_number},{timestamp},inf,{array_size},0.0,False\n")
                    run_times[impl_key].append(float('inf'))
        print(f"  Finished all runs for {size_str}.")

    except IOError as e_io:
        print(f"Error writing results for {size_str}: {e_io}")
    finally:
        for fh_name, fh in file_handles.items():
            if fh and not fh.closed:
                print(f"    Closing file for {fh_name}.")
                fh.close()

    return run_times


def run_radix_sort_benchmark(size: int, runs: int, run_baselines: bool = True,
                             output_base: str = RESULTS_BASE_PATH, arrays_file: str = None):
    print(f"CPU Info: {get_cpu_info()} ({platform.machine()})")
    print(f"CPU Cores: {get_cpu_cores_info()}")
    print(f"RAM Info: {get_ram_info()}")

    return profile_and_save_stats(
        array_size=size,
        total_runs=runs,
        run_baselines=run_baselines,
        output_base=output_base,
        arrays_file=arrays_file
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Profiler for Radix Sort.")
    parser.add_argument(
        "--size",
        type=int,
        default=100000,
        help="Number of elements in the array to sort."
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=RUNS,
        help="Number of times to run each benchmark."
    )
    parser.add_argument(
        "--no_baselines",
        action="store_true",
        help="If set, skips the sorted() and np.sort baselines."
    )
    parser.add_argument(
        "--arrays_file",
        default=None,
        help="Optional .npz written by array_generation.py; its arrays replace the seeded ones."
    )

    args = parser.parse_args()

    if args.size >= 1000000:
        print(f"Note: For array size {args.size:,}, pure Python radix sort execution might be very slow.")

    run_radix_sort_benchmark(
        size=args.size,
        runs=args.runs,
        run_baselines=not args.no_baselines,
        arrays_file=args.arrays_file
    )
    print("\nRadix Sort profiling complete. Results saved to respective files.")
