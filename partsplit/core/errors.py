"""Error types raised by the split, merge and check engines.

Every failure surfaces as a ``PartsError`` subclass whose ``kind`` names one
of the five failure categories. Nothing is retried or logged here.
"""

import errno
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_INPUT = "invalid_input"
    IO = "io"
    CORRUPT = "corrupt"


class PartsError(Exception):
    """Base exception for all partsplit errors."""

    error_code: str = "PRT000"
    kind: ErrorKind = ErrorKind.IO

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None
        self.details = dict(details or {})
        if self.path is not None:
            self.details.setdefault("path", self.path)

    def __str__(self) -> str:
        parts = [f"[{self.error_code}] {self.message}"]
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"({detail_str})")
        return " ".join(parts)


class PartsNotFoundError(PartsError):
    """Raised when the input file or part directory does not exist."""

    error_code = "PRT001"
    kind = ErrorKind.NOT_FOUND


class PartsPermissionError(PartsError):
    """Raised when a path cannot be read or written."""

    error_code = "PRT002"
    kind = ErrorKind.PERMISSION_DENIED


class InvalidInputError(PartsError):
    """Raised for bad configuration.

    Examples:
        - chunk size or buffer size of zero
        - input path that is not a regular file
        - output directory path occupied by a file
    """

    error_code = "PRT003"
    kind = ErrorKind.INVALID_INPUT


class PartsIOError(PartsError):
    """Raised when a read or write fails mid-stream (disk full, device error...)."""

    error_code = "PRT004"
    kind = ErrorKind.IO


class CorruptError(PartsError):
    """Raised when a part set has a gap, a duplicate index, or no parts at all."""

    error_code = "PRT005"
    kind = ErrorKind.CORRUPT


def translate_os_error(exc: OSError, path=None) -> PartsError:
    """Map an ``OSError`` onto the partsplit error taxonomy."""
    target = path if path is not None else exc.filename
    reason = exc.strerror or str(exc)
    if isinstance(exc, FileNotFoundError):
        return PartsNotFoundError(f"Path not found: {reason}", path=target)
    if isinstance(exc, PermissionError) or exc.errno == errno.EROFS:
        return PartsPermissionError(f"Permission denied: {reason}", path=target)
    if isinstance(exc, (IsADirectoryError, NotADirectoryError)):
        return InvalidInputError(f"Wrong path type: {reason}", path=target)
    return PartsIOError(f"I/O failure: {reason}", path=target)
