# scripts/dump_graph.py
from __future__ import annotations

import argparse
import json
import pathlib
import sys
import time
from datetime import datetime, timezone

import numpy as np

# allow "python scripts/dump_graph.py" from the project root
PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from state_notation.config import MAX_MAX_HEIGHT
from state_notation.engine import compute_graph, compute_table
from state_notation.errors import ParamsError
from state_notation.export import edges_frame, states_frame, table_array, table_frame
from state_notation.metrics import avg_branching
from state_notation.params import Params
from state_notation.serialize import render_graph, render_table


def positive_int(val: str) -> int:
    iv = int(val)
    if iv <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return iv


def _ensure_parent(path: pathlib.Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _save_bytes(path: pathlib.Path, data: bytes) -> None:
    _ensure_parent(path)
    path.write_bytes(data)
    print(f"[saved] {path}")


def _save_meta_json(path: pathlib.Path, args: argparse.Namespace, graph, elapsed: float) -> None:
    _ensure_parent(path)
    meta = {
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "params": {
            "num_props": args.num_props,
            "max_height": args.max_height,
            "compact": args.compact,
            "reversed": args.reversed,
        },
        "summary": {
            "states": len(graph.states),
            "edges": len(graph.edges),
            "ground_state": graph.ground_state.to_binary_string(graph.max_height),
            "avg_branching": avg_branching(len(graph.edges), len(graph.states)),
            "elapsed_sec": round(elapsed, 4),
        },
    }
    with path.open("w", encoding="utf-8") as f:
        json.dump(meta, f, ensure_ascii=False, indent=2)
    print(f"[saved] {path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute a siteswap state graph and write it to disk")
    parser.add_argument("-n", "--num-props", type=int, default=3, help="Number of props")
    parser.add_argument("-m", "--max-height", type=positive_int, default=5,
                        help=f"Maximum throw height (<= {MAX_MAX_HEIGHT})")
    parser.add_argument("--compact", action="store_true", help="Encode states as integers in JSON")
    parser.add_argument("--reversed", action="store_true", help="Binary strings LSB first (ignored with --compact)")
    parser.add_argument("--table", action="store_true", help="Also write the adjacency table (JSON, CSV, NPY)")
    parser.add_argument("--out-parquet", action="store_true",
                        help="Also write states/edges as Parquet (requires pyarrow or fastparquet)")
    parser.add_argument(
        "--out-prefix",
        type=str,
        default=None,
        help="Path prefix for outputs (default: runs/graph_n<N>_m<M>)",
    )
    args = parser.parse_args()

    params = Params(args.num_props, args.max_height)
    try:
        params.validate()
    except ParamsError as e:
        parser.error(str(e))

    print(f"Running num_props={args.num_props}  max_height={args.max_height}  "
          f"compact={args.compact}  reversed={args.reversed}")

    t0 = time.perf_counter()
    graph = compute_graph(params)
    t1 = time.perf_counter()

    print("states       :", len(graph.states))
    print("edges        :", len(graph.edges))
    print("ground_state :", graph.ground_state.display(graph.max_height))
    print(f"elapsed      : {t1 - t0:.2f}s")

    prefix = args.out_prefix or f"runs/graph_n{args.num_props}_m{args.max_height}"
    base = pathlib.Path(prefix)

    _save_bytes(base.with_name(base.name + "_graph.json"),
                render_graph(graph, compact=args.compact, reversed=args.reversed))

    states_csv = base.with_name(base.name + "_states.csv")
    edges_csv = base.with_name(base.name + "_edges.csv")
    _ensure_parent(states_csv)
    states_frame(graph).to_csv(states_csv, index=False)
    print(f"[saved] {states_csv}")
    edges_frame(graph).to_csv(edges_csv, index=False)
    print(f"[saved] {edges_csv}")

    if args.table:
        table = compute_table(params)
        _save_bytes(base.with_name(base.name + "_table.json"),
                    render_table(table, compact=args.compact, reversed=args.reversed))
        table_csv = base.with_name(base.name + "_table.csv")
        table_frame(table).to_csv(table_csv)
        print(f"[saved] {table_csv}")
        table_npy = base.with_name(base.name + "_table.npy")
        np.save(str(table_npy), table_array(table))
        print(f"[saved] {table_npy}")

    if args.out_parquet:
        for name, df in (("states", states_frame(graph)), ("edges", edges_frame(graph))):
            path = base.with_name(base.name + f"_{name}.parquet")
            try:
                df.to_parquet(path, index=False)
            except (ImportError, ValueError) as e:
                print(f"[warn] Failed to save Parquet ({e}); skip.")
                break
            print(f"[saved] {path}")

    _save_meta_json(base.with_name(base.name + "_meta.json"), args, graph, t1 - t0)


if __name__ == "__main__":
    main()
