import os

from ..core import PartsError, SplitConfig, run_split, run_split_async
from . import BUFFER_SIZE, CHUNK_SIZE, log


def _report(config, result):
    log(
        f"Split {config.in_file} into {result.part_count} part(s), {result.total_size} bytes → {config.out_dir}",
        context="SPLIT",
    )
    return 0


def _config(file_path, output_dir, chunk_size, buffer_size):
    return SplitConfig(
        in_file=file_path,
        out_dir=output_dir,
        chunk_size=CHUNK_SIZE if chunk_size is None else chunk_size,
        buffer_size=BUFFER_SIZE if buffer_size is None else buffer_size,
    )


def split_command(file_path, output_dir=None, chunk_size=None, buffer_size=None):
    """Splits file_path and logs the outcome. Returns a process exit code."""
    output_dir = output_dir or f"{os.path.basename(file_path)}.parts"
    config = _config(file_path, output_dir, chunk_size, buffer_size)
    log(f"Splitting file: {file_path} (chunk size {config.chunk_size})", context="SPLIT")
    try:
        result = run_split(config)
    except PartsError as e:
        log(f"[FAIL] {e}", context="SPLIT")
        return 1
    return _report(config, result)


async def split_command_async(file_path, output_dir=None, chunk_size=None, buffer_size=None):
    output_dir = output_dir or f"{os.path.basename(file_path)}.parts"
    config = _config(file_path, output_dir, chunk_size, buffer_size)
    log(f"Splitting file: {file_path} (chunk size {config.chunk_size}, async)", context="SPLIT")
    try:
        result = await run_split_async(config)
    except PartsError as e:
        log(f"[FAIL] {e}", context="SPLIT")
        return 1
    return _report(config, result)
