# scripts/plot_counts.py
from __future__ import annotations

"""
Plot state-space growth and one adjacency table.

Produces (under --outdir, default artifacts/plots):
  - state_counts.png      states per max_height, one line per num_props
  - branching.png         average branching per max_height
  - table_n<N>_m<M>.png   adjacency table heatmap (throw heights)
  - summary.csv           the numbers behind the first two plots

Usage:
  python -m scripts.plot_counts
  python -m scripts.plot_counts --max-height 12 --props 2 3 4 --table 3 5
"""

import argparse
import pathlib
import sys
from typing import List

import matplotlib.pyplot as plt
import pandas as pd

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from state_notation.config import MAX_MAX_HEIGHT
from state_notation.engine import compute_table
from state_notation.errors import ParamsError
from state_notation.export import NO_EDGE, table_array
from state_notation.metrics import summary
from state_notation.params import Params

PLOTS_DIR_DEFAULT = PROJECT_ROOT / "artifacts" / "plots"


def savefig(path: pathlib.Path):
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(path, dpi=160)
    plt.close()
    print(f"[ok] wrote {path}")


def plot_state_counts(outdir: pathlib.Path, df: pd.DataFrame, props: List[int]):
    plt.figure(figsize=(8, 4.5))
    found = 0
    for n in props:
        sel = df[df["num_props"] == n].sort_values("max_height")
        if sel.empty:
            continue
        plt.plot(sel["max_height"], sel["states"], marker="o", label=f"{n} props")
        found += 1
    if not found:
        plt.close()
        print("[skip] state_counts: no matching rows")
        return
    plt.yscale("log")
    plt.xlabel("Max height")
    plt.ylabel("States")
    plt.title("State count C(max_height, num_props)")
    plt.legend()
    savefig(outdir / "state_counts.png")


def plot_branching(outdir: pathlib.Path, df: pd.DataFrame, props: List[int]):
    plt.figure(figsize=(8, 4.5))
    for n in props:
        sel = df[df["num_props"] == n].sort_values("max_height")
        if sel.empty:
            continue
        plt.plot(sel["max_height"], sel["avg_branching"], marker="o", label=f"{n} props")
    plt.xlabel("Max height")
    plt.ylabel("Edges per state")
    plt.title("Average branching")
    plt.legend()
    savefig(outdir / "branching.png")


def plot_table(outdir: pathlib.Path, num_props: int, max_height: int):
    table = compute_table(Params(num_props, max_height))
    arr = table_array(table).astype(float)
    arr[arr == NO_EDGE] = float("nan")
    labels = [s.display(max_height) for s in table.states]

    size = max(4.0, 0.35 * len(labels) + 2)
    plt.figure(figsize=(size, size))
    plt.imshow(arr, cmap="viridis")
    plt.colorbar(label="Throw height")
    plt.xticks(range(len(labels)), labels, rotation=90, fontfamily="monospace")
    plt.yticks(range(len(labels)), labels, fontfamily="monospace")
    plt.xlabel("To")
    plt.ylabel("From")
    plt.title(f"{num_props} props, max height {max_height}")
    savefig(outdir / f"table_n{num_props}_m{max_height}.png")


def main():
    parser = argparse.ArgumentParser(description="Plot state counts and an adjacency table")
    parser.add_argument("--outdir", default=str(PLOTS_DIR_DEFAULT),
                        help="Output directory for figures (default: artifacts/plots)")
    parser.add_argument("--max-height", type=int, default=10,
                        help=f"Largest max_height to sweep (<= {MAX_MAX_HEIGHT})")
    parser.add_argument("--props", nargs="*", type=int, default=[1, 2, 3, 4, 5],
                        help="num_props values to draw")
    parser.add_argument("--table", nargs=2, type=int, metavar=("NUM_PROPS", "MAX_HEIGHT"), default=None,
                        help="Also draw the adjacency table for this pair")
    args = parser.parse_args()

    if not 1 <= args.max_height <= MAX_MAX_HEIGHT:
        parser.error(f"--max-height must be between 1 and {MAX_MAX_HEIGHT}")

    outdir = pathlib.Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    df = summary(range(1, args.max_height + 1), verbose=True)
    csv_path = outdir / "summary.csv"
    df.to_csv(csv_path, index=False)
    print(f"[ok] wrote {csv_path}")

    plot_state_counts(outdir, df, args.props)
    plot_branching(outdir, df, args.props)

    if args.table:
        n, m = args.table
        try:
            Params(n, m).validate()
        except ParamsError as e:
            parser.error(str(e))
        plot_table(outdir, n, m)


if __name__ == "__main__":
    main()
