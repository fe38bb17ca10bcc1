from ..core import (
    CheckConfig,
    MergeConfig,
    PartsError,
    run_check,
    run_check_async,
    run_merge,
    run_merge_async,
)
from . import BUFFER_SIZE, log

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_MISMATCH = 2


def _merge_config(input_dir, output_path, buffer_size):
    return MergeConfig(in_dir=input_dir, out_file=output_path, buffer_size=BUFFER_SIZE if buffer_size is None else buffer_size)


def merge_command(input_dir, output_path, buffer_size=None):
    """Rebuilds output_path from the parts in input_dir. Returns a process exit code."""
    log(f"Merging parts from {input_dir}", context="MERGE")
    try:
        result = run_merge(_merge_config(input_dir, output_path, buffer_size))
    except PartsError as e:
        log(f"[FAIL] {e}", context="MERGE")
        return EXIT_FAILED
    log(f"Reconstructed {output_path} from {result.part_count} part(s), {result.total_size} bytes", context="MERGE")
    return EXIT_OK


async def merge_command_async(input_dir, output_path, buffer_size=None):
    log(f"Merging parts from {input_dir} (async)", context="MERGE")
    try:
        result = await run_merge_async(_merge_config(input_dir, output_path, buffer_size))
    except PartsError as e:
        log(f"[FAIL] {e}", context="MERGE")
        return EXIT_FAILED
    log(f"Reconstructed {output_path} from {result.part_count} part(s), {result.total_size} bytes", context="MERGE")
    return EXIT_OK


def _report_check(input_dir, result):
    if result.success:
        log(f"Part set in {input_dir} is complete", context="CHECK")
        return EXIT_OK
    failure = result.error
    if failure.missing:
        log(f"⚠️ {failure.message}: {failure.missing}", context="CHECK")
    else:
        log(f"⚠️ {failure.message}", context="CHECK")
    return EXIT_MISMATCH


def check_command(input_dir, total_size, part_count):
    """Checks a part set against the size and count reported by a split."""
    try:
        result = run_check(CheckConfig(in_dir=input_dir, total_size=total_size, part_count=part_count))
    except PartsError as e:
        log(f"[FAIL] {e}", context="CHECK")
        return EXIT_FAILED
    return _report_check(input_dir, result)


async def check_command_async(input_dir, total_size, part_count):
    try:
        result = await run_check_async(CheckConfig(in_dir=input_dir, total_size=total_size, part_count=part_count))
    except PartsError as e:
        log(f"[FAIL] {e}", context="CHECK")
        return EXIT_FAILED
    return _report_check(input_dir, result)
