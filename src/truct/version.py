"""Version management for truct."""

import re
from importlib import metadata
from pathlib import Path

# Build-time version constant (may be injected when freezing the tool)
__BUILD_VERSION__ = None


def get_version() -> str:
    """
    Get the current version.

    Tries the build-time constant, then installed package metadata, then a
    regex scan of pyproject.toml for source checkouts.

    Returns:
        str: Version string
    """
    if __BUILD_VERSION__:
        return __BUILD_VERSION__

    try:
        return metadata.version("truct")
    except metadata.PackageNotFoundError:
        pass

    pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
    try:
        content = pyproject_path.read_text(encoding='utf-8')
    except OSError:
        return "unknown"

    match = re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE)
    if match and re.match(r'^\d+\.\d+\.\d+(a\d+|b\d+|rc\d+)?$', match.group(1)):
        return match.group(1)
    return "unknown"


__version__ = get_version()
