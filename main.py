import os
import time
import argparse

from constants.params import RUNS, RESULTS_BASE_PATH, SMALL_ARRAY_LENGTH, MID_ARRAY_LENGTH, BIG_ARRAY_LENGTH
from demo import run_demo
from performance_profiling.radix_sort.profile_radix_sort_all import run_radix_sort_benchmark
from plotter import generate_all_plots
from utils.utils import get_formatted_elapsed_time, write_system_info


def save_system_info(output_dir=RESULTS_BASE_PATH):
    file_path = os.path.join(output_dir, "system_info.txt")
    os.makedirs(output_dir, exist_ok=True)
    try:
        with open(file_path, "w") as f:
            write_system_info(f)
        print(f"System info successfully written to {file_path}")
    except IOError as e:
        print(f"Error writing system info to {file_path}: {e}")
    return file_path


def run_radix_sort_suite(size, runs=RUNS, run_baselines=True):
    print(f"--- Radix Sort Suite: Size {size}, Runs {runs} ---")
    return run_radix_sort_benchmark(
        size=size,
        runs=runs,
        run_baselines=run_baselines
    )


if __name__ == "__main__":
    main_parser = argparse.ArgumentParser(description="Radix sort demo and benchmark runner.")
    main_parser.add_argument("--skip_demo", action="store_true", help="If set, skips the demo run.")
    main_parser.add_argument("--skip_profiling", action="store_true", help="If set, skips all profiling suites.")
    main_parser.add_argument("--skip_plots", action="store_true", help="If set, skips plot generation.")
    main_parser.add_argument("--no_baselines", action="store_true",
                             help="If set, profiles radix sort without the sorted() and np.sort baselines.")
    main_parser.add_argument("--runs", type=int, default=RUNS, help="Number of runs per suite.")
    main_args = main_parser.parse_args()

    startTime = time.time()
    save_system_info()

    if not main_args.skip_demo:
        print("\nRunning Radix Sort demo...")
        if not run_demo():
            print("Warning: Demo verification FAILED.")

    if not main_args.skip_profiling:
        run_baselines = not main_args.no_baselines
        for label, size in (("SMALL", SMALL_ARRAY_LENGTH), ("MID", MID_ARRAY_LENGTH), ("BIG", BIG_ARRAY_LENGTH)):
            print(f"\nElapsed time: {get_formatted_elapsed_time(startTime)}")
            print(f"Running {label} Radix Sort tests...")
            run_radix_sort_suite(size, runs=main_args.runs, run_baselines=run_baselines)

    if not main_args.skip_plots:
        print(f"\nElapsed time: {get_formatted_elapsed_time(startTime)}")
        print("Generating plots and summary statistics...")
        generate_all_plots()

    print(f"\nTotal benchmarking time: {get_formatted_elapsed_time(startTime)}")
