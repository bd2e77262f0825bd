import pytest

from truct.runtime.session import ScratchBuffer


@pytest.fixture
def scratch():
    """A small scratch buffer so multi-chunk reads happen on tiny files."""
    return ScratchBuffer(capacity=7)


@pytest.fixture
def write_file(tmp_path):
    """Write bytes under tmp_path and return the path."""
    def _write(name, data):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path
    return _write
