"""
Split, merge and check algorithms, written once as step generators.

Each generator yields I/O requests as tuples (``(READ, n)``, ``(WRITE, data)``,
...) and receives the result of each request back through ``send()``. The
generators never touch the filesystem themselves, so the same loop runs under
the blocking driver and the asyncio driver in ``drivers.py``.
"""

import os

from .errors import InvalidInputError, PartsNotFoundError
from .models import CheckFailure, CheckResult, MergeResult, SplitResult
from .naming import order_parts, part_name, part_path

STAT = "stat"
MAKEDIRS = "makedirs"
LISTDIR = "listdir"
SIZE = "size"
OPEN_SOURCE = "open_source"
OPEN_SINK = "open_sink"
READ = "read"
WRITE = "write"
CLOSE_SOURCE = "close_source"
CLOSE_SINK = "close_sink"

# results of a STAT request
FILE = "file"
DIR = "dir"
OTHER = "other"


def _require_dir(path):
    kind = yield (STAT, path)
    if kind is None:
        raise PartsNotFoundError("Input directory not found", path=path)
    if kind != DIR:
        raise InvalidInputError("Input path is not a directory", path=path)


def split_steps(config):
    """
    Splits config.in_file into part files under config.out_dir.

    Every part holds exactly chunk_size bytes except the last one. An empty
    input still produces a single empty part_0, so the part set of an empty
    file stays distinguishable from an empty directory.

    Returns:
        SplitResult
    """
    config.validate()
    in_file, out_dir = config.in_file, config.out_dir
    chunk_size = config.chunk_size
    buffer_size = config.effective_buffer_size

    kind = yield (STAT, in_file)
    if kind is None:
        raise PartsNotFoundError("Input file not found", path=in_file)
    if kind != FILE:
        raise InvalidInputError("Input path is not a regular file", path=in_file)

    kind = yield (STAT, out_dir)
    if kind is None:
        yield (MAKEDIRS, out_dir)
    elif kind != DIR:
        raise InvalidInputError("Output path is not a directory", path=out_dir)

    yield (OPEN_SOURCE, in_file)
    part_paths = []
    total_size = 0

    data = yield (READ, buffer_size)
    if not data:
        path = part_path(out_dir, 0)
        yield (OPEN_SINK, path)
        yield (CLOSE_SINK,)
        part_paths.append(path)

    while data:
        path = part_path(out_dir, len(part_paths))
        yield (OPEN_SINK, path)
        written = 0
        while data:
            yield (WRITE, data)
            written += len(data)
            if written == chunk_size:
                break
            data = yield (READ, min(buffer_size, chunk_size - written))
        yield (CLOSE_SINK,)
        part_paths.append(path)
        total_size += written

        if written < chunk_size:
            break
        data = yield (READ, buffer_size)

    yield (CLOSE_SOURCE,)
    return SplitResult(total_size=total_size, part_count=len(part_paths), part_paths=part_paths)


def merge_steps(config):
    """
    Concatenates the parts in config.in_dir into config.out_file.

    The part set is ordered and checked for gaps and duplicates before the
    output file is created, so a corrupt set never produces output.

    Returns:
        MergeResult
    """
    config.validate()
    in_dir, out_file = config.in_dir, config.out_file

    yield from _require_dir(in_dir)
    names = yield (LISTDIR, in_dir)
    parts = order_parts(names, directory=in_dir)

    kind = yield (STAT, out_file)
    if kind == DIR:
        raise InvalidInputError("Output path is a directory", path=out_file)
    parent = os.path.dirname(out_file)
    if parent:
        yield (MAKEDIRS, parent)

    yield (OPEN_SINK, out_file)
    total_size = 0
    for _, name in parts:
        yield (OPEN_SOURCE, os.path.join(in_dir, name))
        while True:
            data = yield (READ, config.buffer_size)
            if not data:
                break
            yield (WRITE, data)
            total_size += len(data)
        yield (CLOSE_SOURCE,)
    yield (CLOSE_SINK,)

    return MergeResult(total_size=total_size, part_count=len(parts))


def check_steps(config):
    """Compares the parts in config.in_dir with the expected count and total size."""
    config.validate()
    in_dir = config.in_dir

    yield from _require_dir(in_dir)
    present = set((yield (LISTDIR, in_dir)))

    missing = []
    actual_size = 0
    for index in range(config.part_count):
        name = part_name(index)
        if name not in present:
            missing.append(index)
            continue
        actual_size += yield (SIZE, os.path.join(in_dir, name))

    if missing:
        return CheckResult(
            success=False,
            error=CheckFailure(kind="missing", message="Missing part(s)", missing=missing),
        )

    if actual_size != config.total_size:
        return CheckResult(
            success=False,
            error=CheckFailure(
                kind="size",
                message=f"Parts hold {actual_size} bytes, expected {config.total_size}",
            ),
        )

    return CheckResult(success=True)
