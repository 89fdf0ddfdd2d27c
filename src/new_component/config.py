"""Configuration model and override-file loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from new_component.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".new-component-config.json"

Language = Literal["js", "ts"]


class NewComponentConfig(BaseModel):
    lang: Language = "js"
    dir: Path = Path("src/components")
    prettier_config: dict[str, Any] | None = None
    prettier_command: list[str] = Field(default_factory=lambda: ["npx", "--no-install", "prettier"], min_length=1)
    format: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("lang", mode="before")
    @classmethod
    def normalize_lang(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def _read_overrides(path: Path) -> dict[str, Any]:
    if not path.is_file():
        logger.debug("No config overrides at %s", path)
        return {}

    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {path}") from exc

    if not isinstance(payload, dict):
        raise ConfigError(f"config file must contain a JSON object: {path}")
    logger.debug("Loaded config overrides from %s: %s", path, sorted(payload))
    return payload


def load_config(*, cwd: Path | None = None, home: Path | None = None) -> NewComponentConfig:
    """Resolve the effective configuration.

    Built-in defaults are overridden by ``~/.new-component-config.json``,
    which is in turn overridden by ``.new-component-config.json`` in the
    working directory. Either file may be absent.

    Raises :class:`ConfigError` when a file cannot be read or parsed, or when
    the merged values fail validation.
    """
    cwd = cwd or Path.cwd()
    home = home or Path.home()

    raw: dict[str, Any] = {}
    global_path = home / CONFIG_FILENAME
    local_path = cwd / CONFIG_FILENAME
    raw.update(_read_overrides(global_path))
    if local_path.resolve() != global_path.resolve():
        raw.update(_read_overrides(local_path))

    try:
        return NewComponentConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


__all__ = ["CONFIG_FILENAME", "Language", "NewComponentConfig", "load_config"]
