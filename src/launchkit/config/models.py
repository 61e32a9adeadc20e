"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, launchkit.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ErrorPolicy(StrEnum):
    """What a broadcast does when a plugin hook raises."""

    ABORT = "abort"
    COLLECT = "collect"


# --- launchkit.toml sections ---


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    entry_point_group: str = "launchkit.plugins"
    disabled: list[str] = Field(default_factory=list)
    error_policy: ErrorPolicy = ErrorPolicy.ABORT
