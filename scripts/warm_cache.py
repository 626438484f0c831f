# scripts/warm_cache.py
from __future__ import annotations

import argparse
import multiprocessing as mp
import pathlib
import sys
import time

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from state_notation.cache import FileCache, MemoryCache, TieredCache
from state_notation.config import CACHE_DIR, MAX_MAX_HEIGHT, PRECOMPUTE_MAX_STATES
from state_notation.precompute import precompute


def positive_int(val: str) -> int:
    iv = int(val)
    if iv <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return iv


def main() -> None:
    default_workers = max(1, mp.cpu_count() - 1)

    parser = argparse.ArgumentParser(description="Pre-render every small state graph into the file cache")
    parser.add_argument("--cache-dir", default=str(CACHE_DIR), help=f"Cache directory (default: {CACHE_DIR})")
    parser.add_argument("--max-states", type=positive_int, default=PRECOMPUTE_MAX_STATES,
                        help="Skip (num_props, max_height) pairs with more states than this")
    parser.add_argument("-m", "--max-height", type=positive_int, default=MAX_MAX_HEIGHT,
                        help="Largest max_height to render")
    parser.add_argument("-w", "--workers", type=positive_int, default=default_workers, help="Process pool size")
    parser.add_argument("--batch-size", type=positive_int, default=64, help="Renders per pool batch")
    parser.add_argument("--quiet", action="store_true", help="No progress output")
    args = parser.parse_args()

    if args.max_height > MAX_MAX_HEIGHT:
        parser.error(f"--max-height must be <= {MAX_MAX_HEIGHT}")

    cache = TieredCache(MemoryCache(), FileCache(args.cache_dir))

    t0 = time.perf_counter()
    stats = precompute(
        cache,
        max_states=args.max_states,
        max_height=args.max_height,
        workers=args.workers,
        batch_size=args.batch_size,
        verbose=not args.quiet,
    )
    print(f"computed={stats['computed']}  cached={stats['cached']}  skipped={stats['skipped']}  "
          f"elapsed={time.perf_counter() - t0:.2f}s")


if __name__ == "__main__":
    mp.freeze_support()
    main()
