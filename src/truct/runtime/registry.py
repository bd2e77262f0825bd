"""Registration table of native entry points exposed to build scripts."""

from typing import Callable, Dict

from ..primitives.embedder import embed_file
from ..primitives.filetime import get_file_write_time
from ..primitives.hasher import hash_file
from .session import BuildSession

NATIVE_NAMES = (
    "is_optimized",
    "get_file_write_time",
    "hash_file",
    "embed_file",
)


def build_registry(session: BuildSession) -> Dict[str, Callable]:
    """Bind the native primitives to ``session``.

    The returned mapping is installed once into the orchestration namespace.
    Hashing borrows the session's scratch buffer for each call.
    """

    def _is_optimized() -> bool:
        return session.optimized

    def _hash_file(path) -> int:
        return hash_file(path, session.scratch)

    _is_optimized.__name__ = "is_optimized"
    _hash_file.__name__ = "hash_file"

    registry = {
        "is_optimized": _is_optimized,
        "get_file_write_time": get_file_write_time,
        "hash_file": _hash_file,
        "embed_file": embed_file,
    }
    return registry
