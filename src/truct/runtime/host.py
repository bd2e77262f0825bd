"""Host runtime: session lifecycle around one build invocation.

The host walks a fixed sequence of stages::

    init -> config -> bootstrap -> orchestration -> done

Failures in the scripting stages are fatal and surface as
:class:`FatalBuildError`. Primitive failures never reach this layer; the
primitives report them and return sentinels.
"""

import builtins
import os
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Dict, Optional, Union

from ..config import ProjectConfig
from ..utils.console import _plain_echo
from ..version import get_version
from .registry import build_registry
from .session import BuildSession, SCRATCH_BUFFER_SIZE

BANNER = "~~~~~~~~"
PRELUDE_RESOURCE = "prelude.py"


class Stage(Enum):
    """Lifecycle stages of a build invocation."""
    INIT = "init"
    CONFIG = "config"
    BOOTSTRAP = "bootstrap"
    ORCHESTRATION = "orchestration"
    DONE = "done"


class FatalBuildError(RuntimeError):
    """A failure that aborts the build with a non-zero exit status."""

    def __init__(self, stage: Stage, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.stage = stage
        self.cause = cause


def load_prelude() -> str:
    """Read the bootstrap payload shipped with the package."""
    return resources.files(__package__).joinpath(PRELUDE_RESOURCE).read_text(encoding='utf-8')


class HostRuntime:
    """Owns the build session and hands control to the build script."""

    def __init__(self, config: Optional[ProjectConfig] = None,
                 buffer_size: int = SCRATCH_BUFFER_SIZE,
                 prelude_source: Optional[str] = None):
        self.config = config or ProjectConfig()
        self.stage = Stage.INIT
        self.namespace: Dict[str, object] = {}
        try:
            self.session = BuildSession.create(buffer_size)
        except MemoryError as e:
            raise FatalBuildError(Stage.INIT, "No memory?", e) from e
        self._prelude_source = prelude_source

    def configure(self, optimized: Optional[bool] = None):
        """Apply the optimized-mode setting; ``None`` falls back to config."""
        self.stage = Stage.CONFIG
        if optimized is None:
            optimized = self.config.optimized
        self.session.set_optimized(optimized)

    def _execute(self, source: Union[str, bytes], filename: str, stage: Stage):
        try:
            code = compile(source, filename, 'exec')
            exec(code, self.namespace)
        except SystemExit as e:
            if e.code not in (None, 0):
                raise FatalBuildError(stage, f"{filename} exited with status {e.code}", e) from e
        except Exception as e:
            raise FatalBuildError(stage, f"{filename} failed: {e}", e) from e

    def bootstrap(self):
        """Create the script namespace and install the native entry points."""
        self.stage = Stage.BOOTSTRAP
        self.namespace = {
            '__name__': '__main__',
            '__builtins__': builtins,
            '__natives__': build_registry(self.session),
            '__truct_version__': get_version(),
        }
        try:
            source = self._prelude_source if self._prelude_source is not None else load_prelude()
        except OSError as e:
            raise FatalBuildError(Stage.BOOTSTRAP, f"Could not load {PRELUDE_RESOURCE}: {e}", e) from e
        self._execute(source, PRELUDE_RESOURCE, Stage.BOOTSTRAP)

    def orchestrate(self, base_dir: Optional[Union[str, Path]] = None):
        """Run the build script from ``base_dir`` (default: working directory)."""
        self.stage = Stage.ORCHESTRATION
        script_path = Path(base_dir or ".") / self.config.script
        try:
            source = script_path.read_bytes()
        except OSError as e:
            raise FatalBuildError(Stage.ORCHESTRATION, f"Cannot open {script_path}: {e.strerror}", e) from e
        self.namespace['__file__'] = os.fspath(script_path)
        self._execute(source, os.fspath(script_path), Stage.ORCHESTRATION)

    def run(self, optimized: Optional[bool] = None,
            base_dir: Optional[Union[str, Path]] = None) -> float:
        """Run the whole build and return the elapsed wall-clock seconds."""
        self.configure(optimized)
        _plain_echo(BANNER)
        self.session.start()
        try:
            self.bootstrap()
            self.orchestrate(base_dir)
        finally:
            # Release the script environment on every path
            self.namespace.clear()
        elapsed = self.session.elapsed_seconds()
        self.stage = Stage.DONE
        _plain_echo(f"> Compiled in {elapsed:f} seconds")
        return elapsed
