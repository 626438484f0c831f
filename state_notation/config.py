# state_notation/config.py
from __future__ import annotations

import os
import pathlib

# ---------- bit width ----------
SUPPORTED_WIDTHS = (8, 16, 32, 64, 128)


def _read_width(raw: str | None) -> int:
    if raw is None or raw == "":
        return 32
    try:
        width = int(raw)
    except ValueError as e:
        raise ValueError(f"STATE_NOTATION_BITS must be an integer, got {raw!r}") from e
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"STATE_NOTATION_BITS must be one of {SUPPORTED_WIDTHS}, got {width}")
    return width


STATE_BITS: int = _read_width(os.getenv("STATE_NOTATION_BITS"))
MAX_MAX_HEIGHT: int = STATE_BITS

# ---------- cache ----------
MEMORY_CACHE_CAPACITY = 256 * 1024 * 1024   # bytes across all entries
MEMORY_CACHE_MAX_ENTRY = 1024 * 1024        # bytes per entry

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
CACHE_DIR = pathlib.Path(os.getenv("STATE_NOTATION_CACHE_DIR", str(PROJECT_ROOT / "artifacts" / "cache")))

# ---------- precompute ----------
PRECOMPUTE_MAX_STATES = 10_000
