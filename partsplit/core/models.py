"""Configuration values and operation results."""

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InvalidInputError

DEFAULT_CHUNK_SIZE = 4 * 1024 * 1024  # 4 MiB per part
DEFAULT_BUFFER_SIZE = 1024 * 1024  # 1 MiB streaming buffer


def _require_path(value, name):
    if value is None or str(value) == "":
        raise InvalidInputError(f"{name} is not set")


def _require_positive(value, name):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInputError(f"{name} must be a positive integer", details={name: value})


@dataclass(frozen=True)
class SplitConfig:
    in_file: Optional[str] = None
    out_dir: Optional[str] = None
    chunk_size: int = DEFAULT_CHUNK_SIZE
    buffer_size: int = DEFAULT_BUFFER_SIZE

    def validate(self):
        _require_path(self.in_file, "in_file")
        _require_path(self.out_dir, "out_dir")
        _require_positive(self.chunk_size, "chunk_size")
        _require_positive(self.buffer_size, "buffer_size")

    @property
    def effective_buffer_size(self):
        return min(self.chunk_size, self.buffer_size)


@dataclass(frozen=True)
class MergeConfig:
    in_dir: Optional[str] = None
    out_file: Optional[str] = None
    buffer_size: int = DEFAULT_BUFFER_SIZE

    def validate(self):
        _require_path(self.in_dir, "in_dir")
        _require_path(self.out_file, "out_file")
        _require_positive(self.buffer_size, "buffer_size")


@dataclass(frozen=True)
class CheckConfig:
    """Expected shape of a part set, usually taken from a ``SplitResult``."""

    in_dir: Optional[str] = None
    total_size: Optional[int] = None
    part_count: Optional[int] = None

    def validate(self):
        _require_path(self.in_dir, "in_dir")
        for name in ("total_size", "part_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidInputError(f"{name} must be a non-negative integer", details={name: value})


@dataclass(frozen=True)
class SplitResult:
    total_size: int
    part_count: int
    part_paths: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MergeResult:
    total_size: int
    part_count: int


@dataclass(frozen=True)
class CheckFailure:
    kind: str  # "missing" or "size"
    message: str
    missing: Optional[List[int]] = None


@dataclass(frozen=True)
class CheckResult:
    success: bool
    error: Optional[CheckFailure] = None
