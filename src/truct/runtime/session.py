"""Process-wide build session state and the shared scratch buffer."""

import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

# Capacity of the reusable read buffer (2 MiB)
SCRATCH_BUFFER_SIZE = 2 * 1024 * 1024


class ScratchBuffer:
    """A fixed-capacity byte buffer lent to one primitive call at a time.

    The buffer is allocated once and reused for every file read, which keeps
    peak memory flat no matter how large the hashed files are. Borrowing it
    while it is already lent out raises ``RuntimeError``; the build loop is
    single-threaded so this only trips on programming errors.
    """

    def __init__(self, capacity: int = SCRATCH_BUFFER_SIZE):
        if capacity <= 0:
            raise ValueError(f"Scratch buffer capacity must be positive, got {capacity}")
        self._data = bytearray(capacity)
        self._view = memoryview(self._data)
        self._in_use = False

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def in_use(self) -> bool:
        return self._in_use

    @contextmanager
    def borrow(self) -> Iterator[memoryview]:
        """Lend the whole buffer as a writable memoryview for one call."""
        if self._in_use:
            raise RuntimeError("Scratch buffer is already lent out")
        self._in_use = True
        try:
            yield self._view
        finally:
            self._in_use = False


@dataclass
class BuildSession:
    """State shared by every primitive call during one build invocation."""
    scratch: ScratchBuffer
    optimized: bool = False
    start_ns: Optional[int] = None
    _frozen: bool = field(default=False, repr=False)

    @classmethod
    def create(cls, capacity: int = SCRATCH_BUFFER_SIZE) -> 'BuildSession':
        """Allocate the scratch buffer and return a fresh session.

        Raises:
            MemoryError: If the scratch buffer cannot be allocated.
        """
        return cls(scratch=ScratchBuffer(capacity))

    def set_optimized(self, value: bool):
        """Set optimized mode; only allowed before the build starts."""
        if self._frozen:
            raise RuntimeError("Optimized mode cannot change once the build has started")
        self.optimized = bool(value)

    def start(self) -> int:
        """Record the build start time and lock the configuration."""
        self._frozen = True
        self.start_ns = time.time_ns()
        return self.start_ns

    def elapsed_seconds(self) -> float:
        """Wall-clock seconds since :meth:`start`."""
        if self.start_ns is None:
            raise RuntimeError("Build session has not been started")
        return (time.time_ns() - self.start_ns) / 1_000_000_000
