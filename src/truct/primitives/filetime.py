"""Last-modification time probing with per-platform backends.

Each backend returns an opaque 64-bit integer that only orders correctly
against other values from the same backend:

* POSIX: nanoseconds since the Unix epoch (``st_mtime_ns``).
* Windows: FILETIME ticks, 100 ns units since 1601-01-01 UTC, the value
  ``GetFileTime`` reports for the last write.

Values from different platforms are deliberately left incomparable.
"""

import os
import sys
from typing import Callable, Union

from ..utils.console import _rich_error

# Returned when the file's metadata cannot be read
TIME_SENTINEL = 0

# Offset between the Windows epoch (1601) and the Unix epoch, in 100 ns ticks
_WINDOWS_EPOCH_OFFSET_TICKS = 116444736000000000
_MASK_64 = 0xFFFFFFFFFFFFFFFF

PathType = Union[str, os.PathLike]


def _posix_write_time(path: PathType) -> int:
    # Times before 1970 are negative and clamp to 0
    return min(max(os.stat(path).st_mtime_ns, 0), _MASK_64)


def _windows_write_time(path: PathType) -> int:
    # os.stat opens with backup semantics, so directories and files without
    # read permission still report their metadata
    ticks = os.stat(path).st_mtime_ns // 100 + _WINDOWS_EPOCH_OFFSET_TICKS
    return min(max(ticks, 0), _MASK_64)


def select_backend(platform: str = sys.platform) -> Callable[[PathType], int]:
    """Pick the timestamp backend for a ``sys.platform`` value."""
    if platform.startswith('win') or platform == 'cygwin':
        return _windows_write_time
    return _posix_write_time


_backend = select_backend()


def get_file_write_time(path: PathType) -> int:
    """Return the last-write timestamp of ``path``.

    Args:
        path: File or directory to probe. Only metadata access is needed.

    Returns:
        int: Platform-native 64-bit timestamp, or ``TIME_SENTINEL`` if the
        path cannot be inspected.
    """
    try:
        return _backend(path)
    except (OSError, ValueError):
        _rich_error(f"Cannot get file time from: {os.fsdecode(path)}")
        return TIME_SENTINEL
