"""Tests for truct.yml loading."""
import pytest

from truct.config import DEFAULT_SCRIPT, ConfigError, ProjectConfig, load_config


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path) == ProjectConfig()
    assert load_config(tmp_path).script == DEFAULT_SCRIPT


def test_empty_file_gives_defaults(tmp_path):
    (tmp_path / "truct.yml").write_text("")
    assert load_config(tmp_path) == ProjectConfig()


def test_values_are_read(tmp_path):
    (tmp_path / "truct.yml").write_text("script: tools/make.py\noptimized: true\nextra: 1\n")
    config = load_config(tmp_path)
    assert config.script == "tools/make.py"
    assert config.optimized is True


@pytest.mark.parametrize("content", [
    "- a\n- b\n",
    "script: [unclosed\n",
    "script: 5\n",
    "optimized: maybe\n",
])
def test_invalid_files_raise(tmp_path, content):
    (tmp_path / "truct.yml").write_text(content)
    with pytest.raises(ConfigError):
        load_config(tmp_path)
