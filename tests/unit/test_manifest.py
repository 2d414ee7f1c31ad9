"""Tests for reckon.toml loading."""

from pathlib import Path

import pytest

from reckon.core.errors import ConfigError
from reckon.core.manifest import ReckonManifest, find_manifest, load_manifest


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "reckon.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_full_manifest(tmp_path: Path):
    path = _write(
        tmp_path,
        """
[logging]
level = "DEBUG"

[variables]
g = 9.81
n = 3

[prompt]
enabled = false
""",
    )
    manifest = load_manifest(path)
    assert manifest.path == path
    assert manifest.logging.level == "DEBUG"
    assert manifest.variables == {"g": 9.81, "n": 3.0}
    assert isinstance(manifest.variables["n"], float)
    assert manifest.prompt.enabled is False


def test_defaults_for_empty_file(tmp_path: Path):
    manifest = load_manifest(_write(tmp_path, ""))
    assert manifest.logging.level is None
    assert manifest.variables == {}
    assert manifest.prompt.enabled is True


def test_default_manifest_without_file():
    manifest = ReckonManifest()
    assert manifest.path is None
    assert manifest.prompt.enabled is True


def test_non_numeric_variable(tmp_path: Path):
    path = _write(tmp_path, '[variables]\nx = "three"\n')
    with pytest.raises(ConfigError, match="variable 'x' must be a number"):
        load_manifest(path)


def test_boolean_variable_rejected(tmp_path: Path):
    path = _write(tmp_path, "[variables]\nx = true\n")
    with pytest.raises(ConfigError):
        load_manifest(path)


def test_variable_name_must_be_letters(tmp_path: Path):
    path = _write(tmp_path, "[variables]\nx1 = 1\n")
    with pytest.raises(ConfigError, match="letters only"):
        load_manifest(path)


def test_invalid_toml(tmp_path: Path):
    path = _write(tmp_path, "[variables\n")
    with pytest.raises(ConfigError, match="invalid TOML"):
        load_manifest(path)


def test_find_manifest(tmp_path: Path):
    assert find_manifest(tmp_path) is None
    path = _write(tmp_path, "")
    assert find_manifest(tmp_path) == path


@pytest.mark.parametrize("section", ["logging", "variables", "prompt"])
def test_section_must_be_table(tmp_path: Path, section: str):
    path = _write(tmp_path, f'{section} = "x"\n')
    with pytest.raises(ConfigError, match=rf"\[{section}\] must be a table"):
        load_manifest(path)


def test_logging_level_must_be_string(tmp_path: Path):
    path = _write(tmp_path, "[logging]\nlevel = 10\n")
    with pytest.raises(ConfigError, match="logging level must be a string"):
        load_manifest(path)
