"""Engine settings.

Values come from keyword arguments or, through :func:`load_settings`, from
``CALLMOCK_*`` environment variables. Pydantic enforces the allowed values.
"""

from __future__ import annotations

import logging
import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from callmock.errors import MockConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "CALLMOCK_"

LevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class MockSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    set_mismatch_level: LevelName = "WARNING"
    render_indent: Optional[int] = Field(default=None, ge=0)
    render_sort_keys: bool = True

    @property
    def set_mismatch_levelno(self) -> int:
        return _LEVELS[self.set_mismatch_level]


def _env(env: Mapping[str, str], key: str) -> Optional[str]:
    value = env.get(ENV_PREFIX + key)
    if value is None or not value.strip():
        return None
    return value.strip()


def _parse_bool(key: str, text: str) -> bool:
    lowered = text.lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    raise MockConfigError(f"{ENV_PREFIX}{key} must be a boolean, got {text!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> MockSettings:
    """Build settings from the environment, falling back to defaults."""
    env = os.environ if env is None else env
    values: dict[str, object] = {}

    level = _env(env, "SET_MISMATCH_LEVEL")
    if level is not None:
        values["set_mismatch_level"] = level.upper()

    indent = _env(env, "RENDER_INDENT")
    if indent is not None:
        try:
            values["render_indent"] = int(indent)
        except ValueError as e:
            raise MockConfigError(f"{ENV_PREFIX}RENDER_INDENT must be an integer, got {indent!r}") from e

    sort_keys = _env(env, "RENDER_SORT_KEYS")
    if sort_keys is not None:
        values["render_sort_keys"] = _parse_bool("RENDER_SORT_KEYS", sort_keys)

    try:
        return MockSettings(**values)
    except ValidationError as e:
        logger.error("Invalid callmock settings: %s", e)
        raise MockConfigError(str(e)) from e


__all__ = ["MockSettings", "load_settings", "ENV_PREFIX"]
