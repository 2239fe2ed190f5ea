"""Configuration loading for repomap.

Sources are merged in priority order:
    1. Defaults (defined on ScanConfig)
    2. Project config (./repomap.toml)
    3. Explicit config file
    4. REPOMAP_* environment variables
    5. Keyword overrides

Example:
    >>> config = load_config(max_depth=4)
    >>> config.max_depth
    4
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigurationError


DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_DEPTH = 10

SKIP_NAMES: Tuple[str, ...] = (
	"node_modules",
	".git",
	".next",
	"dist",
	"build",
	"__pycache__",
	"vendor",
	"target",
	".cache",
	"coverage",
	".venv",
	"venv",
)

PROJECT_CONFIG_NAME = "repomap.toml"

_ENV_VARS = {
	"max_file_size": "REPOMAP_MAX_FILE_SIZE",
	"max_depth": "REPOMAP_MAX_DEPTH",
}


class ScanConfig(BaseModel):
	"""Traversal bounds and skip rules for a single scan."""

	model_config = ConfigDict(frozen=True)

	max_file_size: int = DEFAULT_MAX_FILE_SIZE
	max_depth: int = DEFAULT_MAX_DEPTH
	skip_names: Tuple[str, ...] = SKIP_NAMES
	hidden_prefix: str = "."

	@field_validator("max_file_size", "max_depth")
	@classmethod
	def _non_negative(cls, value: int) -> int:
		if value < 0:
			raise ValueError("must be >= 0")
		return value


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> ScanConfig:
	merged: Dict[str, Any] = {}

	project_config = Path.cwd() / PROJECT_CONFIG_NAME
	if project_config.is_file():
		merged.update(_load_toml_file(project_config))

	if config_file is not None:
		config_file = Path(config_file)
		if not config_file.is_file():
			raise ConfigurationError(
				"Config file not found", details={"path": str(config_file)}
			)
		merged.update(_load_toml_file(config_file))

	merged.update(_load_env_vars())
	merged.update({k: v for k, v in overrides.items() if v is not None})

	try:
		return ScanConfig(**merged)
	except ValidationError as e:
		raise ConfigurationError("Invalid configuration", details={"error": str(e)}) from e


def _load_env_vars() -> Dict[str, Any]:
	values: Dict[str, Any] = {}
	for field_name, env_key in _ENV_VARS.items():
		raw = os.environ.get(env_key)
		if raw is None:
			continue
		try:
			values[field_name] = int(raw)
		except ValueError as e:
			raise ConfigurationError(
				f"Invalid integer in {env_key}", details={"value": raw}
			) from e
	return values


def _load_toml_file(path: Path) -> Dict[str, Any]:
	"""Read a TOML file; settings may sit under a [repomap] table or at top level."""
	try:
		with open(path, "rb") as f:
			data = tomllib.load(f)
	except (OSError, tomllib.TOMLDecodeError) as e:
		raise ConfigurationError(
			"Could not read config file", details={"path": str(path), "error": str(e)}
		) from e
	section = data.get("repomap", data)
	if "skip_names" in section:
		section = dict(section)
		section["skip_names"] = tuple(section["skip_names"])
	return section
