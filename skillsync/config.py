"""YAML configuration for skill-sync."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from skillsync.sync.discovery import KNOWN_TOOL_SKILL_DIRS, TargetCandidate
from skillsync.sync.models import SyncError

CONFIG_ENV_VAR = "SKILL_SYNC_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/skill-sync/config.yaml")
DEFAULT_SOURCE_DIR = Path("~/.agents/skills")

class ConfigError(SyncError):
    pass

class TargetSpec(BaseModel):
    name: str
    path: Path

    @field_validator("path")
    @classmethod
    def _expand(cls, value: Path) -> Path:
        return value.expanduser()

def _default_targets() -> list[TargetSpec]:
    return [TargetSpec(name=name, path=Path("~") / rel) for name, rel in KNOWN_TOOL_SKILL_DIRS]

class SyncConfig(BaseModel):
    model_config = ConfigDict(validate_default=True)

    source: Path = DEFAULT_SOURCE_DIR
    strict: bool = False
    targets: list[TargetSpec] = Field(default_factory=_default_targets)

    @field_validator("source")
    @classmethod
    def _expand(cls, value: Path) -> Path:
        return value.expanduser()

    def candidates(self) -> list[TargetCandidate]:
        return [TargetCandidate(name=spec.name, path=spec.path) for spec in self.targets]

def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()

def load_config(path: Optional[Path] = None) -> SyncConfig:
    """Load the config file, falling back to defaults when none exists.

    An explicitly named file (argument or environment variable) must exist.
    """
    explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
    config_path = path.expanduser() if path is not None else default_config_path()

    if not config_path.is_file():
        if explicit:
            raise ConfigError(f"config file not found: {config_path}")
        return SyncConfig()

    try:
        contents = config_path.read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigError(f"failed to read {config_path}: {err}") from err

    try:
        parsed = yaml.safe_load(contents) or {}
    except yaml.YAMLError as err:
        raise ConfigError(f"invalid YAML in {config_path}: {err}") from err
    if not isinstance(parsed, dict):
        raise ConfigError(f"{config_path}: expected a mapping at the top level")

    try:
        return SyncConfig.model_validate(parsed)
    except ValidationError as err:
        raise ConfigError(f"invalid config {config_path}: {err}") from err
