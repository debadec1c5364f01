"""Configuration - loads wslister.yml.

Config file priority (later wins):
1. ~/.wslister/wslister.yml
2. ./wslister.yml
3. Explicit path (--config)
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

DEFAULT_GREETING = "Hello World from wslister!"
DEFAULT_LINE_FORMAT = "Project: {name}"
LOG_LEVELS = ("debug", "info", "warn", "error")


class ConfigError(Exception):
    """Config file is unreadable or has the wrong shape."""

    pass


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand ${VAR} and ${VAR:-default} in strings."""
    if isinstance(value, str):
        pattern = r"\$\{([^}:]+)(?::-([^}]*))?\}"

        def replacer(match):
            env_value = os.environ.get(match.group(1))
            if env_value is not None:
                return env_value
            return match.group(2) or ""

        return re.sub(pattern, replacer, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(v) for v in value]
    else:
        return value


def get_config_paths() -> tuple[Path, Path]:
    """Get home and local config paths."""
    home_config = Path.home() / ".wslister" / "wslister.yml"
    local_config = Path("wslister.yml")
    return home_config, local_config


@dataclass
class ListerConfig:
    """Parsed configuration object."""

    # Snapshot file (None = resolved from env or default)
    workspace: Optional[Path] = None

    # Presentation
    greeting: str = DEFAULT_GREETING
    line_format: str = DEFAULT_LINE_FORMAT

    log_level: str = "info"

    # Where this config came from (None = defaults only)
    source: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ListerConfig":
        """Create config from dictionary."""
        if not isinstance(data, dict):
            raise ConfigError(f"config must be a mapping, got {type(data).__name__}")
        data = _expand_env_vars(data)

        workspace = data.get("workspace")
        if workspace is not None and not isinstance(workspace, str):
            raise ConfigError("workspace must be a path string")

        greeting = data.get("greeting", DEFAULT_GREETING)
        if greeting is not None and not isinstance(greeting, str):
            raise ConfigError("greeting must be a string")

        line_format = data.get("line_format", DEFAULT_LINE_FORMAT)
        if not isinstance(line_format, str):
            raise ConfigError("line_format must be a string")

        logger_section = data.get("logger") or {}
        if not isinstance(logger_section, dict):
            raise ConfigError("logger must be a mapping")

        return cls(
            workspace=Path(workspace) if workspace else None,
            greeting=greeting or "",
            line_format=line_format,
            log_level=str(logger_section.get("level", "info")).lower(),
        )

    @classmethod
    def load(cls, path: Path) -> "ListerConfig":
        """Load config from YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (UnicodeDecodeError, OSError) as e:
            raise ConfigError(f"cannot read {path}: {e}") from e
        config = cls.from_dict(data)
        config.source = Path(path)
        return config

    def validate(self) -> list[str]:
        """Return a list of problems, empty when the config is usable."""
        problems = []
        if self.log_level not in LOG_LEVELS:
            problems.append(
                f"logger.level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )
        try:
            self.line_format.format(name="example")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            problems.append(f"line_format is invalid: {e}")
        return problems

    def to_dict(self) -> dict:
        """Effective config in the file layout."""
        return {
            "workspace": str(self.workspace) if self.workspace else None,
            "greeting": self.greeting,
            "line_format": self.line_format,
            "logger": {"level": self.log_level},
        }


def load_config(path: Optional[Path] = None) -> ListerConfig:
    """Load config from an explicit path, or the local/home files."""
    if path is not None:
        return ListerConfig.load(path)

    config = ListerConfig()
    home_config, local_config = get_config_paths()

    if home_config.exists():
        config = ListerConfig.load(home_config)

    # Local overrides home
    if local_config.exists():
        config = ListerConfig.load(local_config)

    return config
