"""Configuration Management Package"""

import json
import logging
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from git_commit_llm import DEFAULT_MODEL, DEFAULT_TOOL

LOG = logging.getLogger(__name__)

# Environment overrides, checked between CLI flags and the config file
ENV_MODEL = "COMMIT_LLM_MODEL"
ENV_TOOL = "COMMIT_LLM_TOOL"


@dataclass
class Config:
    """Persisted user settings with sensible defaults."""
    model: str = DEFAULT_MODEL
    tool: str = DEFAULT_TOOL
    subject_length: int = 50
    body_width: int = 72
    timeout: int = 300  # seconds to wait for the generation tool

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        for name in ("model", "tool"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                warnings.append(f"Invalid {name} '{value}', using '{getattr(defaults, name)}'")
                setattr(self, name, getattr(defaults, name))

        for name in ("subject_length", "body_width", "timeout"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                warnings.append(f"Invalid {name} '{value}', using {getattr(defaults, name)}")
                setattr(self, name, getattr(defaults, name))

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


@dataclass(frozen=True)
class RunConfig:
    """Options for a single run, fixed once arguments are parsed."""
    stage_all: bool = False
    major: bool = False
    model: str = DEFAULT_MODEL
    push: bool = False
    show_diff: bool = False
    debug: bool = False


class ConfigManager:
    """Finds and loads the config file, local before global."""

    CONFIG_FILENAME = ".commitllmrc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                LOG.debug("Loaded config from %s", path)
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


def resolve_model(cli_model: str | None, config: Config, environ=None) -> str:
    """Pick the model. Precedence: CLI flag > environment > config file."""
    environ = os.environ if environ is None else environ
    return cli_model or environ.get(ENV_MODEL) or config.model


def resolve_tool(config: Config, environ=None) -> str:
    environ = os.environ if environ is None else environ
    return environ.get(ENV_TOOL) or config.tool


__all__ = [
    "Config",
    "RunConfig",
    "ConfigManager",
    "load_config",
    "get_config_path",
    "resolve_model",
    "resolve_tool",
    "ENV_MODEL",
    "ENV_TOOL",
]
