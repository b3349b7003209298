"""Command-line settings loaded from ``DELIMITED_*`` environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from delimited.errors import SettingsError

ENV_PREFIX = "DELIMITED_"


class Settings(BaseModel):
    """Typed runtime configuration for ``delimited-extract``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    log_level: str = "WARNING"
    separator: str = "\t"
    missing: str = ""

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name

    def updated(self, **values: str) -> Settings:
        """Return a copy with ``values`` applied and validated."""
        try:
            return Settings.model_validate(self.model_dump() | values)
        except ValidationError as exc:
            raise SettingsError(f"Invalid setting: {exc}") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``environ`` (default: the process environment)."""

    env = os.environ if environ is None else environ
    values = {
        key[len(ENV_PREFIX) :].lower(): value
        for key, value in env.items()
        if key.startswith(ENV_PREFIX)
    }
    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise SettingsError(f"Invalid environment configuration: {exc}") from exc
