"""Build session, native registration table and host lifecycle."""

from .session import BuildSession, ScratchBuffer, SCRATCH_BUFFER_SIZE
from .registry import build_registry, NATIVE_NAMES
from .host import HostRuntime, FatalBuildError, Stage, BANNER, load_prelude

__all__ = [
    'BuildSession',
    'ScratchBuffer',
    'SCRATCH_BUFFER_SIZE',
    'build_registry',
    'NATIVE_NAMES',
    'HostRuntime',
    'FatalBuildError',
    'Stage',
    'BANNER',
    'load_prelude'
]
