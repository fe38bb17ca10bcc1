import asyncio
import filecmp

import pytest

from partsplit import (
    Check,
    CorruptError,
    Merge,
    Split,
    check_parts_async,
    reconstruct_file,
    reconstruct_file_async,
    split_file,
    split_file_async,
)


@pytest.mark.asyncio
async def test_async_ten_byte_scenario(make_file, tmp_path):
    src = make_file(b"0123456789")
    parts = tmp_path / "parts"

    result = await split_file_async(src, parts, chunk_size=4)
    merged = await reconstruct_file_async(parts, tmp_path / "out.bin")

    assert (result.total_size, result.part_count) == (10, 3)
    assert (merged.total_size, merged.part_count) == (10, 3)
    assert (tmp_path / "out.bin").read_bytes() == b"0123456789"


@pytest.mark.asyncio
async def test_async_matches_blocking(make_file, sample_bytes, tmp_path):
    src = make_file(sample_bytes)

    blocking = split_file(src, tmp_path / "sync", chunk_size=8192, buffer_size=1000)
    non_blocking = await Split().in_file(src).out_dir(tmp_path / "async").chunk_size(8192).max_buffer_capacity(1000).run_async()

    assert blocking.total_size == non_blocking.total_size
    assert blocking.part_count == non_blocking.part_count
    for a, b in zip(blocking.part_paths, non_blocking.part_paths):
        assert filecmp.cmp(a, b, shallow=False)

    out = tmp_path / "out.bin"
    merged = await Merge().in_dir(tmp_path / "async").out_file(out).run_async()
    assert merged == reconstruct_file(tmp_path / "sync", tmp_path / "out_sync.bin")
    assert filecmp.cmp(src, out, shallow=False)


@pytest.mark.asyncio
async def test_async_empty_input(make_file, tmp_path):
    src = make_file(b"")

    result = await split_file_async(src, tmp_path / "parts", chunk_size=4)
    merged = await reconstruct_file_async(tmp_path / "parts", tmp_path / "out.bin")

    assert result.part_count == 1
    assert merged.total_size == 0
    assert (tmp_path / "out.bin").read_bytes() == b""


@pytest.mark.asyncio
async def test_async_gap_is_corrupt(tmp_path):
    parts = tmp_path / "parts"
    parts.mkdir()
    for index in (0, 2, 3):
        (parts / f"part_{index}").write_bytes(b"data")

    with pytest.raises(CorruptError):
        await reconstruct_file_async(parts, tmp_path / "out.bin")
    assert not (tmp_path / "out.bin").exists()


@pytest.mark.asyncio
async def test_async_check(make_file, tmp_path):
    src = make_file(b"0123456789")
    result = await split_file_async(src, tmp_path / "parts", chunk_size=3)

    report = await check_parts_async(tmp_path / "parts", result.total_size, result.part_count)
    assert report.success

    report = await Check().in_dir(tmp_path / "parts").total_size(10).part_count(5).run_async()
    assert report.error.missing == [4]


@pytest.mark.asyncio
async def test_concurrent_splits_on_disjoint_directories(make_file, tmp_path):
    first = make_file(b"a" * 1000, name="a.bin")
    second = make_file(b"b" * 1500, name="b.bin")

    results = await asyncio.gather(
        split_file_async(first, tmp_path / "a", chunk_size=100),
        split_file_async(second, tmp_path / "b", chunk_size=100),
    )

    assert [r.part_count for r in results] == [10, 15]


@pytest.mark.parametrize("func", [split_file_async, reconstruct_file_async, check_parts_async, Check])
def test_async_entry_points_are_documented(func):
    assert func.__doc__
    if func is not Check:
        assert "Returns:" in func.__doc__
