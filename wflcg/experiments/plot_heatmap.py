# wflcg/experiments/plot_heatmap.py
"""
Heatmap of benchmark results: x axis = method (u32, float, double, ...),
y axis = generator, cell = mean nanoseconds per value over all trials.

CSV expected columns: generator, method, trial, ns_per_value
 - generator: str (e.g. WFLCG, numpy.PCG64)
 - method: str (e.g. u32, double)
 - trial: int (trial id)
 - ns_per_value: float

Usage:
    wflcg-plot --csv results/benchmark_XXXX.csv --out heatmap.png
"""

import argparse
import os

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

REQUIRED_COLUMNS = {'generator', 'method', 'trial', 'ns_per_value'}
METHOD_ORDER = ['u32', 'float', 'double', 'double2', 'direct']


def prepare_pivot(df):
    # mean ns/value for each (generator, method)
    agg = df.groupby(['generator', 'method'], as_index=False)['ns_per_value'].mean()
    pivot = agg.pivot(index='generator', columns='method', values='ns_per_value')
    # known methods first in a fixed order, anything else after
    cols = [m for m in METHOD_ORDER if m in pivot.columns]
    cols += sorted(c for c in pivot.columns if c not in METHOD_ORDER)
    pivot = pivot[cols]
    # fastest generator (by best method) on top
    order = pivot.min(axis=1).sort_values().index
    return pivot.loc[order]


def plot_heatmap(pivot, title='Generator Throughput (ns per value)', out_file=None, annotate=True, show=True):
    rows = pivot.index.tolist()
    cols = pivot.columns.tolist()
    data = pivot.values.astype(float)  # NaN for methods a generator does not offer

    fig, ax = plt.subplots(figsize=(0.9*len(cols)+4, 0.6*len(rows)+2))
    im = ax.imshow(data, aspect='auto', interpolation='nearest', cmap='viridis_r')

    ax.set_xticks(np.arange(len(cols)))
    ax.set_yticks(np.arange(len(rows)))
    ax.set_xticklabels(cols)
    ax.set_yticklabels(rows)
    ax.set_xlabel('Method')
    ax.set_ylabel('Generator')
    ax.set_title(title)

    plt.setp(ax.get_xticklabels(), rotation=45, ha='right')

    if annotate:
        finite = data[~np.isnan(data)]
        mid = (finite.min() + finite.max()) / 2 if finite.size else 0.0
        for i in range(len(rows)):
            for j in range(len(cols)):
                val = data[i, j]
                if np.isnan(val):
                    ax.text(j, i, 'N/A', ha='center', va='center', color='gray', fontsize=9)
                else:
                    ax.text(j, i, f"{val:.0f}", ha='center', va='center', color='white' if val < mid else 'black', fontsize=9)

    cbar = fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04)
    cbar.set_label('Mean ns per value (lower is faster)')

    plt.tight_layout()
    if out_file:
        os.makedirs(os.path.dirname(out_file) or '.', exist_ok=True)
        plt.savefig(out_file, dpi=300)
        print(f"Heatmap saved to {out_file}")
    if show:
        plt.show()
    return fig


def load_results(path):
    df = pd.read_csv(path)
    if not REQUIRED_COLUMNS.issubset(set(df.columns)):
        raise SystemExit(f"CSV must contain columns: {REQUIRED_COLUMNS}. Found: {df.columns.tolist()}")
    df['generator'] = df['generator'].astype(str)
    df['method'] = df['method'].astype(str)
    df['ns_per_value'] = df['ns_per_value'].astype(float)
    return df


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot a benchmark CSV as a heatmap')
    parser.add_argument('--csv', required=True, help='Path to benchmark CSV')
    parser.add_argument('--out', default='results/heatmap_ns_per_value.png', help='Output PNG path')
    parser.add_argument('--title', default='Generator Throughput (ns per value)', help='Plot title')
    parser.add_argument('--no-show', action='store_true', help='Only save the PNG')
    args = parser.parse_args(argv)

    if args.no_show:
        matplotlib.use('Agg')
    df = load_results(args.csv)
    pivot = prepare_pivot(df)
    plot_heatmap(pivot, title=args.title, out_file=args.out, annotate=True, show=not args.no_show)


if __name__ == '__main__':
    main()
