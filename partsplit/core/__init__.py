from .chunker import (
    Check,
    Merge,
    Split,
    check_parts,
    check_parts_async,
    reconstruct_file,
    reconstruct_file_async,
    run_check,
    run_check_async,
    run_merge,
    run_merge_async,
    run_split,
    run_split_async,
    split_file,
    split_file_async,
)
from .errors import (
    CorruptError,
    ErrorKind,
    InvalidInputError,
    PartsError,
    PartsIOError,
    PartsNotFoundError,
    PartsPermissionError,
)
from .models import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_CHUNK_SIZE,
    CheckConfig,
    CheckFailure,
    CheckResult,
    MergeConfig,
    MergeResult,
    SplitConfig,
    SplitResult,
)
from .naming import PART_PREFIX, parse_part_index, part_name

__all__ = [
    "Check", "Merge", "Split",
    "split_file", "reconstruct_file", "check_parts",
    "split_file_async", "reconstruct_file_async", "check_parts_async",
    "run_split", "run_merge", "run_check",
    "run_split_async", "run_merge_async", "run_check_async",
    "SplitConfig", "MergeConfig", "CheckConfig",
    "SplitResult", "MergeResult", "CheckResult", "CheckFailure",
    "DEFAULT_CHUNK_SIZE", "DEFAULT_BUFFER_SIZE",
    "PART_PREFIX", "part_name", "parse_part_index",
    "PartsError", "ErrorKind", "PartsNotFoundError", "PartsPermissionError",
    "InvalidInputError", "PartsIOError", "CorruptError",
]
