"""Run configuration and the loader for local YAML / JSON config files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML

from .exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class DemoConfig(BaseModel):
    """Tunables consulted by the scenarios that touch external resources."""

    database_url: str = Field(
        "invalid:url",
        min_length=1,
        description="Connection URL handed to the driver lookup.",
    )
    database_user: str = Field("user", description="Connection user name.")
    database_password: str = Field("pass", description="Connection password.")
    max_sleep_ms: int = Field(
        10_000, ge=0, description="Longest pause the sleep scenario accepts."
    )
    max_buffer_size: int = Field(
        1_000_000, ge=1, description="Largest buffer the index scenario allocates."
    )

    model_config = ConfigDict(extra="forbid")


def load_config(path: str | Path) -> DemoConfig:
    """Read a config file from disk and validate it into a `DemoConfig`."""
    file_path = Path(path)

    if not file_path.exists():
        logger.error("Config file not found: %s", file_path)
        raise ConfigLoadError(
            f"Config file not found: {file_path}", config_path=str(file_path)
        )

    supported = _YAML_EXTS | _JSON_EXTS
    if file_path.suffix.lower() not in supported:
        raise ConfigLoadError(
            f"Unsupported extension '{file_path.suffix}'. "
            f"Supported: {', '.join(sorted(supported))}",
            config_path=str(file_path),
        )

    raw_text = file_path.read_text(encoding="utf-8")

    try:
        if file_path.suffix.lower() in _YAML_EXTS:
            data: Dict[str, Any] = _yaml_parser.load(raw_text)
        else:  # .json
            data = json.loads(raw_text)
    except Exception as exc:
        raise ConfigLoadError(
            f"Cannot parse {file_path.name}: {exc}", config_path=str(file_path)
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            "Top-level object must be a mapping", config_path=str(file_path)
        )

    try:
        config = DemoConfig.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigLoadError(
            f"Invalid configuration in {file_path.name}: {exc}",
            config_path=str(file_path),
        ) from exc

    logger.debug("Config file loaded (%d keys)", len(data))
    return config
