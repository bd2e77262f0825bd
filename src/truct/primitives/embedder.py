"""Render binary files as C array fragments for compile-time inclusion.

The generated text is consumed by downstream C builds, so its layout is a
fixed contract::

    enum { FILE_SIZE = 3 };
    static const unsigned char FILE_DATA[] = {
    0x61,0x62,0x63
    };

Bytes are lowercase two-digit hex, comma separated, with a line break after
every sixteenth entry and no trailing comma.
"""

import os
import re
from typing import Union

from ..utils.console import _rich_error

SIZE_NAME = "FILE_SIZE"
DATA_NAME = "FILE_DATA"
BYTES_PER_LINE = 16

PathType = Union[str, os.PathLike]

_HEADER_REGEX = re.compile(
    rf"\Aenum \{{ {SIZE_NAME} = (\d+) \}};\n"
    rf"static const unsigned char {DATA_NAME}\[\] = \{{\n"
    r"(.*)\n\};\n\Z",
    re.DOTALL,
)


def render_resource(data: bytes) -> str:
    """Render ``data`` as the embedded-resource text fragment."""
    size = len(data)
    parts = []
    for i, byte in enumerate(data):
        if i == size - 1:
            sep = ""
        elif (i + 1) % BYTES_PER_LINE == 0:
            sep = ",\n"
        else:
            sep = ","
        parts.append(f"0x{byte:02x}{sep}")

    return (
        f"enum {{ {SIZE_NAME} = {size} }};\n"
        f"static const unsigned char {DATA_NAME}[] = {{\n"
        f"{''.join(parts)}"
        "\n};\n"
    )


def parse_resource(text: str) -> bytes:
    """Decode a fragment produced by :func:`render_resource`.

    Raises:
        ValueError: If the text is not a well-formed fragment or the declared
            size disagrees with the array length.
    """
    match = _HEADER_REGEX.match(text)
    if not match:
        raise ValueError("Not an embedded resource fragment")

    declared = int(match.group(1))
    body = match.group(2).replace("\n", "")
    if not body:
        values = []
    else:
        try:
            values = [int(token, 16) for token in body.split(",")]
        except ValueError as e:
            raise ValueError(f"Malformed byte entry: {e}") from e

    if len(values) != declared:
        raise ValueError(
            f"Declared {SIZE_NAME} = {declared} but array holds {len(values)} bytes"
        )
    return bytes(values)


def _read_all(path: PathType) -> bytes:
    with open(path, 'rb') as f:
        # Size comes from the seek position rather than stat metadata
        size = f.seek(0, os.SEEK_END)
        f.seek(0, os.SEEK_SET)
        data = f.read(size)
    return data


def embed_file(input_path: PathType, output_path: PathType) -> None:
    """Write ``input_path``'s bytes to ``output_path`` as a C array fragment.

    The output is rewritten on every call. When the input cannot be read the
    output is left untouched. Failures are reported on the error stream and
    never raised.
    """
    try:
        data = _read_all(input_path)
    except (OSError, ValueError):
        _rich_error(f"Error opening file: {os.fsdecode(input_path)}")
        return

    text = render_resource(data)
    try:
        with open(output_path, 'w', encoding='ascii', newline='\n') as out:
            out.write(text)
    except (OSError, ValueError):
        _rich_error(f"Error writing file: {os.fsdecode(output_path)}")
