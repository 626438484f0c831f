# state_notation/precompute.py
"""Warm the cache with every graph small enough to be worth keeping around."""
from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from typing import Dict, Iterable, List, Tuple

from tqdm import tqdm

from .cache import TieredCache
from .config import MAX_MAX_HEIGHT, PRECOMPUTE_MAX_STATES
from .engine import compute_graph
from .metrics import combinations
from .params import Params
from .serialize import cache_key, render_graph

Job = Tuple[int, int, bool]   # (num_props, max_height, compact)


def _render_job(job: Job) -> bytes:
    # top level so the process pool can pickle it
    num_props, max_height, compact = job
    return render_graph(compute_graph(Params(num_props, max_height)), compact=compact)


def chunked(seq: list, size: int) -> Iterable[list]:
    for i in range(0, len(seq), size):
        yield seq[i:i + size]


def plan(
    cache: TieredCache,
    max_states: int = PRECOMPUTE_MAX_STATES,
    max_height: int = MAX_MAX_HEIGHT,
) -> Tuple[List[Job], int, int]:
    """Return ``(jobs, cached, skipped)``: renders still missing from the file tier."""
    jobs: List[Job] = []
    cached = 0
    skipped = 0
    for num_props in range(1, max_height + 1):
        for h in range(num_props, max_height + 1):
            if combinations(h, num_props) > max_states:
                skipped += 1
                continue
            for compact in (False, True):
                if cache.files.exists(cache_key("graph", num_props, h, compact)):
                    cached += 1
                    continue
                jobs.append((num_props, h, compact))
    return jobs, cached, skipped


def precompute(
    cache: TieredCache,
    max_states: int = PRECOMPUTE_MAX_STATES,
    max_height: int = MAX_MAX_HEIGHT,
    workers: int = 1,
    batch_size: int = 64,
    verbose: bool = False,
) -> Dict[str, int]:
    if max_height > MAX_MAX_HEIGHT:
        raise ValueError(f"max_height {max_height} exceeds {MAX_MAX_HEIGHT}")

    jobs, cached, skipped = plan(cache, max_states=max_states, max_height=max_height)
    if verbose:
        print(f"[precompute] to_render={len(jobs)}  cached={cached}  skipped={skipped}  workers={workers}",
              flush=True)

    computed = 0
    bar = tqdm(total=len(jobs), desc="precompute", disable=not verbose)
    if workers <= 1:
        for job in jobs:
            cache.put(cache_key("graph", job[0], job[1], job[2]), _render_job(job))
            computed += 1
            bar.update(1)
    else:
        # workers only render; the parent owns every cache write
        with ProcessPoolExecutor(max_workers=workers) as ex:
            for batch in chunked(jobs, batch_size):
                for job, data in zip(batch, ex.map(_render_job, batch)):
                    cache.put(cache_key("graph", job[0], job[1], job[2]), data)
                    computed += 1
                    bar.update(1)
    bar.close()

    stats = {"computed": computed, "cached": cached, "skipped": skipped}
    if verbose:
        print(f"[precompute] done  computed={computed}  cached={cached}  skipped={skipped}", flush=True)
    return stats
