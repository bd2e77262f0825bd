"""truct: native primitives and host runtime for script-driven builds."""

from .version import __version__

__all__ = ['__version__']
