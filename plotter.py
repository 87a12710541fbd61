import os
import re
from collections import defaultdict

import pandas as pd
import matplotlib.pyplot as plt

# --- Configuration ---
RESULTS_DIR = 'results'
OUTPUT_DIR = 'visualizations_and_stats'
SUMMARY_STATS_FILENAME = 'summary_statistics_excl_warmup.csv'
PERF_COL = 'MElements/s'
# Plotting Aesthetics
FIG_WIDTH = 6
FIG_DPI = 150
COMP_FIG_HEIGHT = 6
COMP_BAR_WIDTH = 0.5
LABEL_FONT_SIZE = 13
TITLE_FONT_SIZE = 15
TICK_FONT_SIZE = 11
LEGEND_FONT_SIZE = 12
ANNOTATION_FONT_SIZE = 12
BAR_LABEL_Y_FACTOR = 1.15
# --- End Configuration ---

# Bars are ordered baseline first, then sort-based finders
IMPLEMENTATION_ORDER = ['xor', 'hashmap', 'radix', 'radix_numba']


def sanitize_filename(name):
    """Removes potentially problematic characters for filenames."""
    name = re.sub(r'[\\/*?:"<>|]+', '_', name)
    name = re.sub(r'\s+', '_', name)
    name = re.sub(r'[^a-zA-Z0-9_.-]', '', name)
    return name


def get_implementation_sort_key(impl_name):
    if impl_name in IMPLEMENTATION_ORDER:
        return (IMPLEMENTATION_ORDER.index(impl_name), impl_name)
    return (len(IMPLEMENTATION_ORDER), impl_name)


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
        if PERF_COL in df.columns:
            df[PERF_COL] = pd.to_numeric(df[PERF_COL], errors='coerce')
        if df.empty:
            return None
        return df
    except FileNotFoundError:
        print(f"Error: File not found {file_path}")
        return None
    except pd.errors.EmptyDataError:
        print(f"Warning: Skipping empty file {file_path}")
        return None


def calculate_stats_excluding_warmup(series):
    """Calculates stats for a series already excluding the warm-up run."""
    if not isinstance(series, pd.Series) or series.empty or series.isnull().all():
        count = len(series) if isinstance(series, pd.Series) else 0
        return {'mean': float('nan'), 'median': float('nan'), 'stdev': float('nan'), 'count': count}
    valid_data = series.dropna()
    stdev = valid_data.std() if len(valid_data) >= 2 else 0.0
    return {'mean': series.mean(), 'median': series.median(), 'stdev': stdev, 'count': len(series)}


def plot_comparison(stats_dict, metric_name, unit, algorithm, size_str, output_dir, use_median=False):
    """Saves a log-scale bar chart comparing implementations for one size. Returns the path or None."""
    if not stats_dict:
        return None

    sorted_impl_keys = sorted(stats_dict, key=get_implementation_sort_key)
    stat_key = 'median' if use_median else 'mean'
    plot_title_stat = 'Median' if use_median else 'Average'

    values = [stats_dict[impl].get(metric_name, {}).get(stat_key, float('nan')) for impl in sorted_impl_keys]
    errors = [stats_dict[impl].get(metric_name, {}).get('stdev', float('nan')) for impl in sorted_impl_keys]

    # Log axis: only strictly positive values can be drawn
    valid_indices = [i for i, v in enumerate(values) if pd.notna(v) and v > 0]
    if not valid_indices:
        return None

    labels = [sorted_impl_keys[i] for i in valid_indices]
    filtered_values = [values[i] for i in valid_indices]
    filtered_errors = [errors[i] if pd.notna(errors[i]) else 0 for i in valid_indices]

    plt.figure(figsize=(FIG_WIDTH, COMP_FIG_HEIGHT))
    ax = plt.gca()
    x_positions = range(len(filtered_values))
    bars = ax.bar(x_positions, filtered_values, yerr=filtered_errors, capsize=5, color='skyblue',
                  edgecolor='black', log=True, width=COMP_BAR_WIDTH)

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
        if abs(yval) >= 1000:
            fmt = '{:,.0f}'
        elif abs(yval) >= 1:
            fmt = '{:,.2f}'
        else:
            fmt = '{:.6f}'
        text_y = yval * BAR_LABEL_Y_FACTOR
        max_text_y = max(max_text_y, text_y)
        ax.text(x=bar.get_x() + bar.get_width() / 2.0, y=text_y, s=fmt.format(yval),
                va='bottom', ha='center', fontsize=ANNOTATION_FONT_SIZE)

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
        comp_plot_path = None
    plt.close()
    return comp_plot_path


def plot_scaling(summary_df, algorithm, output_dir):
    """Saves a log-log plot of median time against sample size, one line per implementation."""
    df_time = summary_df[(summary_df['Algorithm'] == algorithm) & (summary_df['Metric'] == 'Time(s)')]
    df_time = df_time[(df_time['Median'] > 0) & (df_time['Elements'] > 0)]
    if df_time.empty:
        return None

    plt.figure(figsize=(FIG_WIDTH * 1.5, COMP_FIG_HEIGHT))
    for impl in sorted(df_time['Implementation'].unique(), key=get_implementation_sort_key):
        df_impl = df_time[df_time['Implementation'] == impl].sort_values('Elements')
        plt.plot(df_impl['Elements'], df_impl['Median'], marker='o', linestyle='-', label=impl)

    plt.xscale('log')
    plt.yscale('log')
    plt.xlabel('Sample Length (elements)', fontsize=LABEL_FONT_SIZE)
    plt.ylabel('Median Time (s)', fontsize=LABEL_FONT_SIZE)
    plt.title(f'Scaling (Warm-up Excluded)\nAlg: {algorithm}', fontsize=TITLE_FONT_SIZE)
    plt.grid(True, which='both', linestyle='--', linewidth=0.5)
    plt.legend(fontsize=LEGEND_FONT_SIZE)
    plt.tight_layout()

    scaling_plot_path = os.path.join(output_dir, "scaling_median_time_excl_warmup_loglog.png")
    try:
        plt.savefig(scaling_plot_path, dpi=FIG_DPI)
    except Exception as e:
        print(f"Error saving scaling plot {scaling_plot_path}: {e}")
        scaling_plot_path = None
    plt.close()
    return scaling_plot_path


def collect_results(results_dir):
    """Returns {algorithm: {size: {implementation: DataFrame}}} for <results>/<alg>/<size>/<impl>_stats.txt."""
    all_data = defaultdict(lambda: defaultdict(dict))
    for root, dirs, files in os.walk(results_dir):
        for file_name in files:
            if not file_name.endswith('_stats.txt'):
                continue
            file_path = os.path.join(root, file_name)
            parts = os.path.relpath(file_path, results_dir).split(os.sep)
            if len(parts) != 3:
                continue
            algorithm, size_str, impl_file = parts
            df = load_data_file(file_path)
            if df is not None:
                all_data[algorithm][size_str][impl_file[:-len('_stats.txt')]] = df
    return all_data


def generate_all_plots(results_dir=RESULTS_DIR, output_dir=OUTPUT_DIR):
    """
    Loads every stats file, writes the summary CSV and saves comparison and
    scaling plots. The first run of every file is treated as warm-up and excluded.

    Returns:
        The summary statistics as a DataFrame (empty when no results were found).
    """
    os.makedirs(output_dir, exist_ok=True)
    print(f"Input directory: {os.path.abspath(results_dir)}")
    print(f"Output directory: {os.path.abspath(output_dir)}")
    print("NOTE: All statistics and plots will exclude the first run (warm-up).")

    print("\n--- Starting Data Collection ---")
    all_data = collect_results(results_dir)
    print("--- Data Collection Finished ---")

    print("\n--- Calculating Statistics and Generating Comparison Plots ---")
    summary_rows = []
    for algorithm, sizes_dict in all_data.items():
        algo_output_dir = os.path.join(output_dir, sanitize_filename(algorithm))
        for size_str, implementations_dict in sizes_dict.items():
            size_output_dir = os.path.join(algo_output_dir, sanitize_filename(size_str))
            os.makedirs(size_output_dir, exist_ok=True)
            current_run_stats = {}

            for implementation_name, df_impl in implementations_dict.items():
                df_stats = df_impl[df_impl['Run'] > 1]
                elements = int(df_impl['Size'].iloc[0]) if 'Size' in df_impl.columns else None
                current_run_stats[implementation_name] = {}
                for metric in ('Time(s)', PERF_COL):
                    if metric not in df_stats.columns:
                        continue
                    stats = calculate_stats_excluding_warmup(df_stats[metric])
                    current_run_stats[implementation_name][metric] = stats
                    summary_rows.append({'Algorithm': algorithm, 'Size': size_str, 'Elements': elements,
                                         'Implementation': implementation_name, 'Metric': metric,
                                         'Mean': stats['mean'], 'Median': stats['median'],
                                         'StdDev': stats['stdev'], 'Count': stats['count']})

            plot_comparison(current_run_stats, 'Time(s)', 's', algorithm, size_str, size_output_dir,
                            use_median=True)
            plot_comparison(current_run_stats, PERF_COL, 'MElements/s', algorithm, size_str, size_output_dir)
    print("--- Comparison Plotting Finished ---")

    summary_df = pd.DataFrame(summary_rows, columns=['Algorithm', 'Size', 'Elements', 'Implementation', 'Metric',
                                                     'Mean', 'Median', 'StdDev', 'Count'])
    if summary_df.empty:
        print("Warning: No benchmark results found, nothing to summarise.")
        return summary_df

    summary_df = summary_df.sort_values(['Algorithm', 'Elements', 'Implementation', 'Metric'])
    summary_path = os.path.join(output_dir, SUMMARY_STATS_FILENAME)
    try:
        summary_df.to_csv(summary_path, index=False, float_format='%.6f')
        print(f"Summary statistics saved to {summary_path}")
    except IOError as e:
        print(f"Error writing summary statistics to {summary_path}: {e}")

    for algorithm in summary_df['Algorithm'].unique():
        plot_scaling(summary_df, algorithm, os.path.join(output_dir, sanitize_filename(algorithm)))

    return summary_df


if __name__ == "__main__":
    generate_all_plots()
