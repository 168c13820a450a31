import os
import re
import argparse
from collections import defaultdict

import pandas as pd
import matplotlib.pyplot as plt

from constants.params import RESULTS_BASE_PATH

# --- Configuration ---
RESULTS_DIR = RESULTS_BASE_PATH.rstrip('/')
OUTPUT_DIR = 'visualizations_and_stats'
SUMMARY_STATS_FILE_NAME = 'summary_statistics_excl_warmup.csv'
BASELINE_IMPLEMENTATION = 'python_sorted_stats'
PERF_COLUMN = 'MElements/s'
# Plotting Aesthetics
FIG_WIDTH = 6
FIG_DPI = 150
COMP_FIG_HEIGHT = 6
RUN_FIG_HEIGHT = 6
COMP_BAR_WIDTH = 0.5
LABEL_FONT_SIZE = 13
TITLE_FONT_SIZE = 15
TICK_FONT_SIZE = 11
LEGEND_FONT_SIZE = 12
ANNOTATION_FONT_SIZE = 12
BAR_LABEL_Y_FACTOR = 1.15
SUMMARY_COLUMNS = ['Algorithm', 'Size', 'Implementation', 'Metric', 'Mean', 'Median', 'StdDev', 'Count']
# --- End Configuration ---


# --- Helper Functions ---
def sanitize_filename(name):
    """Removes potentially problematic characters for filenames."""
    name = re.sub(r'[\\/*?:"<>|]+', '_', name)
    name = re.sub(r'\s+', '_', name)
    name = re.sub(r'[^a-zA-Z0-9_.-]', '', name)
    return name


def get_implementation_sort_key(impl_name):
    """
    Determines the order of implementations in comparison plots:
    radix sort first, then the baselines, alphabetically within each group.
    """
    if 'radix' in impl_name.lower():
        return (0, impl_name)
    return (1, impl_name)


def load_data_file(file_path):
    """Loads data from a single benchmark file."""
    try:
        df = pd.read_csv(file_path, skipinitialspace=True)
        if 'Run' not in df.columns or 'Time(s)' not in df.columns:
            print(f"Warning: Required columns ('Run', 'Time(s)') not found in {file_path}. Skipping.")
            return None
        df['Time(s)'] = pd.to_numeric(df['Time(s)'], errors='coerce')
        df = df[df['Time(s)'] != float('inf')]
        df = df.dropna(subset=['Time(s)']).copy()

        if PERF_COLUMN in df.columns:
            df[PERF_COLUMN] = pd.to_numeric(df[PERF_COLUMN], errors='coerce')
            df = df[df[PERF_COLUMN] > 0]

        if df.empty:
            print(f"Warning: No valid data left in {file_path} after cleaning.")
            return None
        return df.reset_index(drop=True)
    except FileNotFoundError:
        print(f"Error: File not found {file_path}")
        return None
    except pd.errors.EmptyDataError:
        print(f"Warning: Skipping empty file {file_path}")
        return None


def calculate_stats_excluding_warmup(series):
    """Calculates stats for a series already excluding the warm-up run."""
    if not isinstance(series, pd.Series):
        return {'mean': float('nan'), 'median': float('nan'), 'stdev': float('nan'), 'count': 0}
    if series.empty or series.isnull().all():
        return {'mean': float('nan'), 'median': float('nan'), 'stdev': float('nan'), 'count': len(series)}
    valid_data = series.dropna()
    stdev = valid_data.std() if len(valid_data) >= 2 else 0.0
    return {'mean': series.mean(), 'median': series.median(), 'stdev': stdev, 'count': len(series)}


def plot_individual_run(df, algorithm, size_str, implementation, output_dir):
    """Generates and saves time and throughput plots for one result file, excluding Run 1."""
    df_plot = df[df['Run'] > 1]
    if df_plot.empty:
        return

    base_filename = sanitize_filename(implementation)
    metrics = [('Time(s)', 'Time (s)', 'o', 'tab:blue')]
    if PERF_COLUMN in df_plot.columns:
        metrics.append((PERF_COLUMN, PERF_COLUMN, 'x', 'green'))

    for column, label, marker, color in metrics:
        median = df_plot[column].median()
        stdev = df_plot[column].std() if len(df_plot[column].dropna()) >= 2 else 0.0

        plt.figure(figsize=(FIG_WIDTH, RUN_FIG_HEIGHT))
        plt.plot(df_plot['Run'], df_plot[column], marker=marker, linestyle='-', color=color, label=label)
        if pd.notna(median):
            plt.axhline(median, color='r', linestyle='--', linewidth=1.5, label=f'Median: {median:.4f}')
        if pd.notna(stdev) and stdev > 1e-9:
            plt.text(0.98, 0.95, f'Std Dev: {stdev:.4f}', transform=plt.gca().transAxes,
                     fontsize=ANNOTATION_FONT_SIZE, verticalalignment='top', horizontalalignment='right',
                     bbox=dict(boxstyle='round,pad=0.3', fc='white', alpha=0.8))

        plt.xlabel('Run Number (Warm-up Excluded)', fontsize=LABEL_FONT_SIZE)
        plt.ylabel(label, fontsize=LABEL_FONT_SIZE)
        plt.title(f'{label} per Run\nAlg: {algorithm}\nConfig: {size_str}\nImpl: {implementation}',
                  fontsize=TITLE_FONT_SIZE)
        plt.xticks(fontsize=TICK_FONT_SIZE)
        plt.yticks(fontsize=TICK_FONT_SIZE)
        plt.grid(True, which='both', linestyle='--', linewidth=0.5)
        plt.legend(fontsize=LEGEND_FONT_SIZE)
        plt.tight_layout()
        plot_path = os.path.join(output_dir, f"{base_filename}_{sanitize_filename(column)}_vs_run_excl_warmup.png")
        try:
            plt.savefig(plot_path, dpi=FIG_DPI)
        except Exception as e:
            print(f"Error saving plot {plot_path}: {e}")
        plt.close()


def plot_comparison(stats_dict, metric_name, unit, algorithm, size_str, output_dir, use_median=False):
    """Generates a log-scale bar plot comparing implementations on one metric."""
    if not stats_dict:
        return

    sorted_impl_keys = sorted(stats_dict.keys(), key=get_implementation_sort_key)
    stat_key = 'median' if use_median else 'mean'
    plot_title_stat = 'Median' if use_median else 'Average'

    labels, values, errors = [], [], []
    for impl_key in sorted_impl_keys:
        stats = stats_dict[impl_key].get(metric_name, {})
        value = stats.get(stat_key, float('nan'))
        if pd.notna(value) and value > 0:
            labels.append(impl_key)
            values.append(value)
            error = stats.get('stdev', float('nan'))
            errors.append(error if pd.notna(error) else 0)
    if not values:
        return

    plt.figure(figsize=(FIG_WIDTH, COMP_FIG_HEIGHT))
    ax = plt.gca()
    x_positions = range(len(values))
    bars = ax.bar(x_positions, values, yerr=errors, capsize=5, color='skyblue', edgecolor='black',
                  log=True, width=COMP_BAR_WIDTH)

    ax.set_ylabel(f'{plot_title_stat} {metric_name} ({unit})', fontsize=LABEL_FONT_SIZE)
    ax.set_title(f'Comparison of {plot_title_stat} {metric_name}\nAlg: {algorithm}\nConfig: {size_str}',
                 fontsize=TITLE_FONT_SIZE)
    ax.set_xticks(list(x_positions))
    ax.set_xticklabels(labels, rotation=30, ha='right', fontsize=TICK_FONT_SIZE)
    plt.yticks(fontsize=TICK_FONT_SIZE)
    ax.grid(True, which='major', axis='y', linestyle='-', linewidth=0.7)
    ax.grid(True, which='minor', axis='y', linestyle=':', linewidth=0.5)

    max_text_y = 0
    for bar in bars:
        yval = bar.get_height()
        fmt = '{:,.2f}' if abs(yval) >= 1 else '{:.4f}'
        text_y_position = yval * BAR_LABEL_Y_FACTOR
        max_text_y = max(max_text_y, text_y_position)
        ax.text(x=bar.get_x() + bar.get_width() / 2.0, y=text_y_position,
                s=fmt.format(yval), va='bottom', ha='center', fontsize=ANNOTATION_FONT_SIZE)

    plt.tight_layout()
    bottom_lim, top_lim = ax.get_ylim()
    if max_text_y >= top_lim * 0.85:
        ax.set_ylim(bottom=bottom_lim, top=max_text_y * 1.25)
        plt.tight_layout()

    comp_plot_path = os.path.join(
        output_dir, f"comparison_{plot_title_stat.lower()}_{sanitize_filename(metric_name)}_excl_warmup_log.png")
    try:
        plt.savefig(comp_plot_path, dpi=FIG_DPI)
    except Exception as e:
        print(f"Error saving log comparison plot {comp_plot_path}: {e}")
    plt.close()


def collect_results(results_dir):
    """Walks results_dir/<algorithm>/<size>/<impl>.txt and loads every result file."""
    all_data = defaultdict(lambda: defaultdict(dict))
    for root, dirs, files in os.walk(results_dir):
        for file_name in files:
            if not file_name.endswith('.txt'):
                continue
            file_path = os.path.join(root, file_name)
            parts = os.path.relpath(file_path, results_dir).split(os.sep)
            if len(parts) != 3:
                continue
            algorithm, size_str, impl_file = parts
            df = load_data_file(file_path)
            if df is not None:
                all_data[algorithm][size_str][impl_file[:-len('.txt')]] = df
    return all_data


def _summary_row(algorithm, size_str, implementation, metric, stats):
    return {'Algorithm': algorithm, 'Size': size_str, 'Implementation': implementation, 'Metric': metric,
            'Mean': stats['mean'], 'Median': stats['median'], 'StdDev': stats['stdev'], 'Count': stats['count']}


def generate_all_plots(results_dir=RESULTS_DIR, output_dir=OUTPUT_DIR):
    """
    Loads every result file, plots each implementation's runs and the
    per-size comparisons, and saves a summary CSV. Returns the summary
    DataFrame, or None when no results were found.
    """
    os.makedirs(output_dir, exist_ok=True)
    print(f"Input directory: {os.path.abspath(results_dir)}")
    print(f"Output directory: {os.path.abspath(output_dir)}")
    print("NOTE: All statistics and plots will exclude the first run (warm-up).")
    print("NOTE: Comparison plots will use a logarithmic Y-axis.")

    print("\n--- Starting Data Collection ---")
    all_data = collect_results(results_dir)
    print("--- Data Collection Finished ---")

    print("\n--- Generating Plots and Statistics (Excluding Warm-up Run) ---")
    summary_rows = []
    for algorithm, sizes_dict in all_data.items():
        for size_str, implementations_dict in sizes_dict.items():
            size_output_dir = os.path.join(output_dir, sanitize_filename(algorithm), sanitize_filename(size_str))
            os.makedirs(size_output_dir, exist_ok=True)

            current_run_stats = {}
            for implementation_name, df in implementations_dict.items():
                plot_individual_run(df, algorithm, size_str, implementation_name, size_output_dir)

                df_stats = df[df['Run'] > 1]
                time_stats = calculate_stats_excluding_warmup(df_stats['Time(s)'])
                current_run_stats[implementation_name] = {'Time(s)': time_stats}
                summary_rows.append(_summary_row(algorithm, size_str, implementation_name, 'Time(s)', time_stats))

                if PERF_COLUMN in df_stats.columns:
                    perf_stats = calculate_stats_excluding_warmup(df_stats[PERF_COLUMN])
                    current_run_stats[implementation_name][PERF_COLUMN] = perf_stats
                    summary_rows.append(
                        _summary_row(algorithm, size_str, implementation_name, PERF_COLUMN, perf_stats))

            plot_comparison(current_run_stats, 'Time(s)', 's', algorithm, size_str, size_output_dir)
            plot_comparison(current_run_stats, 'Time(s)', 's', algorithm, size_str, size_output_dir,
                            use_median=True)
            plot_comparison(current_run_stats, PERF_COLUMN, 'MElements/s', algorithm, size_str, size_output_dir)

            baseline_stats = current_run_stats.get(BASELINE_IMPLEMENTATION)
            if baseline_stats is None:
                continue
            baseline_median = baseline_stats['Time(s)']['median']
            for implementation_name, impl_stats in current_run_stats.items():
                impl_median = impl_stats['Time(s)']['median']
                if implementation_name == BASELINE_IMPLEMENTATION or not pd.notna(impl_median):
                    continue
                if not pd.notna(baseline_median) or baseline_median <= 1e-12:
                    continue
                ratio = impl_median / baseline_median
                summary_rows.append({'Algorithm': algorithm, 'Size': size_str,
                                     'Implementation': f'{implementation_name} relative to {BASELINE_IMPLEMENTATION}',
                                     'Metric': 'Median Time Ratio', 'Mean': ratio, 'Median': ratio,
                                     'StdDev': float('nan'), 'Count': 1})
    print("--- Plotting and Statistics Finished ---")

    print("\n--- Saving Summary Statistics (Excluding Warm-up Run) ---")
    if not summary_rows:
        print("No summary statistics were generated.")
        return None

    summary_df = pd.DataFrame(summary_rows, columns=SUMMARY_COLUMNS)
    summary_path = os.path.join(output_dir, SUMMARY_STATS_FILE_NAME)
    try:
        summary_df.to_csv(summary_path, index=False, float_format='%.5f')
        print(f"Summary statistics saved to: {summary_path}")
    except IOError as e:
        print(f"Error saving summary statistics CSV: {e}")
    return summary_df


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Plots and summarises radix sort profiling results.")
    parser.add_argument("--results_dir", default=RESULTS_DIR, help="Directory holding the result files.")
    parser.add_argument("--output_dir", default=OUTPUT_DIR, help="Directory for plots and the summary CSV.")
    args = parser.parse_args()

    generate_all_plots(args.results_dir, args.output_dir)
