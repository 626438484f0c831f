# state_notation/cache.py
"""
Read-through cache of serialized engine output.

  memory (bounded LRU, per-entry size cap)  ->  local files  ->  compute

A hit in the file tier is copied into memory when it fits.
"""
from __future__ import annotations

import os
import pathlib
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from .config import MEMORY_CACHE_CAPACITY, MEMORY_CACHE_MAX_ENTRY


class MemoryCache:
    def __init__(self, max_capacity: int = MEMORY_CACHE_CAPACITY, max_entry_size: int = MEMORY_CACHE_MAX_ENTRY):
        self.max_capacity = max_capacity
        self.max_entry_size = max_entry_size
        self._entries: "OrderedDict[str, bytes]" = OrderedDict()
        self._weight = 0

    def fits(self, data: bytes) -> bool:
        return len(data) <= self.max_entry_size

    def get(self, key: str) -> Optional[bytes]:
        data = self._entries.get(key)
        if data is not None:
            self._entries.move_to_end(key)
        return data

    def insert(self, key: str, data: bytes) -> bool:
        """Store ``data`` unless it is over the entry cap; evict least recently used entries to make room."""
        if not self.fits(data):
            return False
        old = self._entries.pop(key, None)
        if old is not None:
            self._weight -= len(old)
        self._entries[key] = data
        self._weight += len(data)
        while self._weight > self.max_capacity and self._entries:
            _, evicted = self._entries.popitem(last=False)
            self._weight -= len(evicted)
        return key in self._entries

    @property
    def weight(self) -> int:
        return self._weight

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class FileCache:
    def __init__(self, directory: os.PathLike | str):
        self.dir = pathlib.Path(directory)
        self.dir.mkdir(parents=True, exist_ok=True)

    def path(self, key: str) -> pathlib.Path:
        return self.dir / key

    def get(self, key: str) -> Optional[bytes]:
        p = self.path(key)
        if not p.is_file():
            return None
        return p.read_bytes()

    def exists(self, key: str) -> bool:
        return self.path(key).is_file()

    def put(self, key: str, data: bytes) -> None:
        final_path = self.path(key)
        tmp_path = self.dir / f".{key}.tmp"
        try:
            with tmp_path.open("wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, final_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


class TieredCache:
    def __init__(self, memory: MemoryCache, files: FileCache):
        self.memory = memory
        self.files = files

    def put(self, key: str, data: bytes) -> None:
        self.files.put(key, data)
        self.memory.insert(key, data)

    def get_or_compute(self, key: str, compute: Callable[[], bytes]) -> Tuple[bytes, str]:
        """Return ``(data, tier)``; tier is "memory", "file" or "none" (freshly computed)."""
        data = self.memory.get(key)
        if data is not None:
            return data, "memory"

        data = self.files.get(key)
        if data is not None:
            self.memory.insert(key, data)
            return data, "file"

        data = compute()
        self.put(key, data)
        return data, "none"
