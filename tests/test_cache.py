import pytest

from state_notation.cache import FileCache, MemoryCache, TieredCache


def test_memory_fits_boundary():
    mc = MemoryCache(max_capacity=100, max_entry_size=10)
    assert mc.fits(b"x" * 10)
    assert not mc.fits(b"x" * 11)
    assert mc.fits(b"")

def test_memory_rejects_oversized_entry():
    mc = MemoryCache(max_capacity=100, max_entry_size=10)
    assert not mc.insert("big", b"x" * 11)
    assert mc.get("big") is None

def test_memory_evicts_least_recently_used():
    mc = MemoryCache(max_capacity=20, max_entry_size=10)
    mc.insert("a", b"a" * 10)
    mc.insert("b", b"b" * 10)
    assert mc.get("a") is not None      # a is now the most recent
    mc.insert("c", b"c" * 10)
    assert "b" not in mc
    assert "a" in mc and "c" in mc
    assert mc.weight == 20

def test_memory_overwrite_updates_weight():
    mc = MemoryCache(max_capacity=100, max_entry_size=10)
    mc.insert("k", b"12345")
    mc.insert("k", b"12")
    assert mc.weight == 2
    assert len(mc) == 1

def test_file_put_and_get(tmp_path):
    fc = FileCache(tmp_path)
    fc.put("key1", b"hello world")
    assert fc.get("key1") == b"hello world"

def test_file_missing_key(tmp_path):
    assert FileCache(tmp_path).get("nonexistent") is None

def test_file_exists_and_overwrite(tmp_path):
    fc = FileCache(tmp_path)
    assert not fc.exists("key1")
    fc.put("key1", b"first")
    fc.put("key1", b"second")
    assert fc.exists("key1")
    assert fc.get("key1") == b"second"
    assert not list(tmp_path.glob(".*.tmp"))

def test_file_creates_directory(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    FileCache(nested)
    assert nested.is_dir()

def test_file_put_failure_cleans_up(tmp_path):
    fc = FileCache(tmp_path)
    (tmp_path / "blocked").mkdir()     # a directory cannot be replaced by a file
    with pytest.raises(OSError):
        fc.put("blocked", b"data")
    assert not (tmp_path / ".blocked.tmp").exists()

def test_tiered_read_through(tmp_path):
    calls = []

    def compute():
        calls.append(1)
        return b"payload"

    cache = TieredCache(MemoryCache(), FileCache(tmp_path))
    assert cache.get_or_compute("k", compute) == (b"payload", "none")
    assert cache.get_or_compute("k", compute) == (b"payload", "memory")
    assert len(calls) == 1

    # a fresh memory tier falls back to the files and repopulates memory
    cold = TieredCache(MemoryCache(), FileCache(tmp_path))
    assert cold.get_or_compute("k", compute) == (b"payload", "file")
    assert "k" in cold.memory
    assert len(calls) == 1

def test_tiered_skips_memory_for_large_entries(tmp_path):
    cache = TieredCache(MemoryCache(max_entry_size=4), FileCache(tmp_path))
    data, tier = cache.get_or_compute("k", lambda: b"too large")
    assert tier == "none"
    assert "k" not in cache.memory
    assert cache.get_or_compute("k", lambda: b"unused") == (b"too large", "file")
