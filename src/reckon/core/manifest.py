import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from reckon.core.errors import ConfigError

MANIFEST_NAME = "reckon.toml"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str | None = None  # None defers to RECKON_LOG_LEVEL / RECKON_ENV


@dataclass
class PromptConfig:
    """Interactive prompting for undefined variables."""

    enabled: bool = True


@dataclass
class ReckonManifest:
    """Contents of reckon.toml.

    Example:

        [logging]
        level = "DEBUG"

        [variables]
        g = 9.81

        [prompt]
        enabled = false
    """

    path: Path | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    variables: dict[str, float] = field(default_factory=dict)
    prompt: PromptConfig = field(default_factory=PromptConfig)


def find_manifest(start: Path | None = None) -> Path | None:
    """Return ``reckon.toml`` in ``start`` (default: cwd) if it exists."""
    candidate = (start or Path.cwd()) / MANIFEST_NAME
    return candidate if candidate.is_file() else None


def _table(data: dict, key: str, path: Path) -> dict:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{path}: [{key}] must be a table, got {value!r}")
    return value


def load_manifest(path: Path) -> ReckonManifest:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: invalid TOML: {e}") from e

    logging_data = _table(data, "logging", path)
    prompt_data = _table(data, "prompt", path)

    level = logging_data.get("level")
    if level is not None and not isinstance(level, str):
        raise ConfigError(f"{path}: logging level must be a string, got {level!r}")

    variables: dict[str, float] = {}
    for name, value in _table(data, "variables", path).items():
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{path}: variable '{name}' must be a number, got {value!r}")
        if not name.isalpha():
            raise ConfigError(f"{path}: variable name '{name}' must contain letters only")
        variables[name] = float(value)

    return ReckonManifest(
        path=path,
        logging=LoggingConfig(level=level),
        variables=variables,
        prompt=PromptConfig(enabled=bool(prompt_data.get("enabled", True))),
    )
