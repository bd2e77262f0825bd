"""Tests for C array resource embedding."""
import pytest

from truct.primitives.embedder import embed_file, parse_resource, render_resource


def test_three_bytes_exact_layout():
    assert render_resource(b"abc") == (
        "enum { FILE_SIZE = 3 };\n"
        "static const unsigned char FILE_DATA[] = {\n"
        "0x61,0x62,0x63\n"
        "};\n"
    )


def test_empty_input_layout():
    text = render_resource(b"")
    assert text == (
        "enum { FILE_SIZE = 0 };\n"
        "static const unsigned char FILE_DATA[] = {\n"
        "\n"
        "};\n"
    )
    assert parse_resource(text) == b""


def test_wraps_after_every_sixteenth_byte():
    text = render_resource(bytes(range(33)))
    lines = text.split("\n")
    assert lines[2] == ",".join(f"0x{i:02x}" for i in range(16)) + ","
    assert lines[3] == ",".join(f"0x{i:02x}" for i in range(16, 32)) + ","
    assert lines[4] == "0x20"
    assert lines[5] == "};"


def test_exact_multiple_of_sixteen_has_no_trailing_comma():
    text = render_resource(bytes(16))
    assert text.endswith("0x00,0x00\n};\n")
    assert ",\n};" not in text


def test_hex_is_lowercase():
    assert "0xab,0xcd,0xef" in render_resource(b"\xab\xcd\xef")


def test_round_trip_through_file(write_file, tmp_path):
    data = bytes(range(256)) + b"\x00\xff" * 37
    src = write_file("blob.bin", data)
    out = tmp_path / "blob.h"

    embed_file(src, out)

    text = out.read_text(encoding="ascii")
    assert text.startswith(f"enum {{ FILE_SIZE = {len(data)} }};\n")
    assert parse_resource(text) == data


def test_output_uses_unix_newlines(write_file, tmp_path):
    src = write_file("in.bin", bytes(40))
    out = tmp_path / "out.h"
    embed_file(src, out)
    assert b"\r\n" not in out.read_bytes()


def test_reembedding_is_byte_identical(write_file, tmp_path):
    src = write_file("in.bin", b"\x01\x02\x03" * 11)
    out = tmp_path / "out.h"
    embed_file(src, out)
    first = out.read_bytes()
    embed_file(src, out)
    assert out.read_bytes() == first


def test_overwrites_existing_output(write_file, tmp_path):
    src = write_file("in.bin", b"z")
    out = write_file("out.h", b"stale contents that are longer than the new ones")
    embed_file(src, out)
    assert parse_resource(out.read_text()) == b"z"


def test_missing_input_leaves_output_untouched(tmp_path, write_file, capsys):
    out = write_file("out.h", b"previous")
    embed_file(tmp_path / "missing.bin", out)
    assert out.read_bytes() == b"previous"
    assert "Error opening file" in capsys.readouterr().err


def test_missing_input_does_not_create_output(tmp_path):
    out = tmp_path / "never.h"
    embed_file(tmp_path / "missing.bin", out)
    assert not out.exists()


def test_unwritable_output_is_reported(write_file, tmp_path, capsys):
    src = write_file("in.bin", b"a")
    embed_file(src, tmp_path / "no_such_dir" / "out.h")
    assert "Error writing file" in capsys.readouterr().err


@pytest.mark.parametrize("text", [
    "",
    "enum { FILE_SIZE = 2 };\nstatic const unsigned char FILE_DATA[] = {\n0x01\n};\n",
    "enum { FILE_SIZE = 1 };\nstatic const unsigned char FILE_DATA[] = {\n0xzz\n};\n",
    "static const unsigned char FILE_DATA[] = {\n0x01\n};\n",
])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_resource(text)


def test_input_path_with_nul_byte_is_reported(tmp_path, write_file, capsys):
    out = write_file("out.h", b"previous")
    embed_file(str(tmp_path / "a\x00b"), out)
    assert out.read_bytes() == b"previous"
    assert "Error opening file" in capsys.readouterr().err


def test_output_path_with_nul_byte_is_reported(write_file, tmp_path, capsys):
    src = write_file("in.bin", b"a")
    embed_file(src, str(tmp_path / "o\x00ut.h"))
    assert "Error writing file" in capsys.readouterr().err
