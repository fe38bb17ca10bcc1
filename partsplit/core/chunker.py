from dataclasses import replace

from .drivers import drive, drive_async
from .engine import check_steps, merge_steps, split_steps
from .models import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_CHUNK_SIZE,
    CheckConfig,
    MergeConfig,
    SplitConfig,
)


def run_split(config):
    return drive(split_steps(config))


def run_merge(config):
    return drive(merge_steps(config))


def run_check(config):
    return drive(check_steps(config))


async def run_split_async(config):
    return await drive_async(split_steps(config))


async def run_merge_async(config):
    return await drive_async(merge_steps(config))


async def run_check_async(config):
    return await drive_async(check_steps(config))


def split_file(file_path, output_dir, chunk_size=DEFAULT_CHUNK_SIZE, buffer_size=DEFAULT_BUFFER_SIZE):
    """
    Splits a file into binary parts.

    Args:
        file_path (str): Path to the input file.
        output_dir (str): Directory to save parts in, created if missing.
        chunk_size (int): Size of each part in bytes (default: 4MB).
        buffer_size (int): Upper bound on bytes held in memory at once.

    Returns:
        SplitResult: Total size, part count and ordered part paths.
    """
    return run_split(SplitConfig(file_path, output_dir, chunk_size, buffer_size))


def reconstruct_file(input_dir, output_path, buffer_size=DEFAULT_BUFFER_SIZE):
    """
    Reconstructs a file from the parts found in a directory.

    Args:
        input_dir (str): Directory holding part_0 .. part_N.
        output_path (str): Path to the output file, created or truncated.
        buffer_size (int): Size of the copy buffer.

    Returns:
        MergeResult: Total size written and number of parts consumed.
    """
    return run_merge(MergeConfig(input_dir, output_path, buffer_size))


def check_parts(input_dir, total_size, part_count):
    """Reports missing parts or a size mismatch without raising for either."""
    return run_check(CheckConfig(input_dir, total_size, part_count))


async def split_file_async(file_path, output_dir, chunk_size=DEFAULT_CHUNK_SIZE, buffer_size=DEFAULT_BUFFER_SIZE):
    """
    Splits a file into binary parts without blocking the event loop.

    Args:
        file_path (str): Path to the input file.
        output_dir (str): Directory to save parts in, created if missing.
        chunk_size (int): Size of each part in bytes (default: 4MB).
        buffer_size (int): Upper bound on bytes held in memory at once.

    Returns:
        SplitResult: Total size, part count and ordered part paths.
    """
    return await run_split_async(SplitConfig(file_path, output_dir, chunk_size, buffer_size))


async def reconstruct_file_async(input_dir, output_path, buffer_size=DEFAULT_BUFFER_SIZE):
    """
    Reconstructs a file from its parts, suspending on every read and write.

    Args:
        input_dir (str): Directory holding part_0 .. part_N.
        output_path (str): Path to the output file, created or truncated.
        buffer_size (int): Size of the copy buffer.

    Returns:
        MergeResult: Total size written and number of parts consumed.
    """
    return await run_merge_async(MergeConfig(input_dir, output_path, buffer_size))


async def check_parts_async(input_dir, total_size, part_count):
    """
    Non-blocking form of check_parts.

    Args:
        input_dir (str): Directory holding the parts.
        total_size (int): Expected sum of part sizes.
        part_count (int): Expected number of parts.

    Returns:
        CheckResult: success, or the missing indices or size mismatch.
    """
    return await run_check_async(CheckConfig(input_dir, total_size, part_count))


class _Process:
    """Chained setup around an immutable config. Every setter returns a new process."""

    config_type = None

    def __init__(self, config=None):
        self.config = config if config is not None else self.config_type()

    def _with(self, **changes):
        return type(self)(replace(self.config, **changes))

    def __repr__(self):
        return f"{type(self).__name__}({self.config!r})"


class Split(_Process):
    """
    Process to split a file into a directory of parts.

    Example:
        result = Split().in_file("big.iso").out_dir("parts").chunk_size(8 << 20).run()
    """

    config_type = SplitConfig

    def in_file(self, path):
        return self._with(in_file=path)

    def out_dir(self, path):
        return self._with(out_dir=path)

    def chunk_size(self, size):
        return self._with(chunk_size=size)

    def max_buffer_capacity(self, capacity):
        return self._with(buffer_size=capacity)

    def run(self):
        return run_split(self.config)

    async def run_async(self):
        return await run_split_async(self.config)


class Merge(_Process):
    """Process to merge a directory of parts back into one file."""

    config_type = MergeConfig

    def in_dir(self, path):
        return self._with(in_dir=path)

    def out_file(self, path):
        return self._with(out_file=path)

    def max_buffer_capacity(self, capacity):
        return self._with(buffer_size=capacity)

    def run(self):
        return run_merge(self.config)

    async def run_async(self):
        return await run_merge_async(self.config)


class Check(_Process):
    """Process to verify a part set against the size and count a split reported."""

    config_type = CheckConfig

    def in_dir(self, path):
        return self._with(in_dir=path)

    def total_size(self, size):
        return self._with(total_size=size)

    def part_count(self, count):
        return self._with(part_count=count)

    def run(self):
        return run_check(self.config)

    async def run_async(self):
        return await run_check_async(self.config)
