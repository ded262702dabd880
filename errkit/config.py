"""
errkit — Configuration System

All configuration is Pydantic-validated and loaded from:
1. a YAML file (defaults)
2. Environment variables (overrides, ERRKIT_ prefix)

The active configuration is process-wide. It is consulted at call time by
the display layer (frame separator, timestamp format) and by the assertion
layer (where diagnostics are written before a panic).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, EnvSettingsSource, SettingsConfigDict

# ─── Sub-configs ──────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "console"  # "console" | "json"


class DisplayConfig(BaseModel):
    frame_separator: str = " <- "
    # "iso" renders datetime.isoformat(); anything else is a strftime pattern
    timestamp_format: str = "iso"

    @field_validator("frame_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("frame_separator must not be empty")
        return value


class AssertConfig(BaseModel):
    # Where failed assertions are displayed before the panic is raised.
    sink: Literal["stderr", "stdout", "none"] = "stderr"


# ─── Root Config ──────────────────────────────────────────────────


class ErrkitConfig(BaseSettings):
    """
    Root configuration. Loads from YAML, overridable by env vars.
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRKIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    asserts: AssertConfig = Field(default_factory=AssertConfig)


def load_config(config_path: str | Path | None = None) -> ErrkitConfig:
    """
    Load configuration from YAML file, then apply environment variable overrides.
    Environment values are merged over the YAML tree key by key, so
    ERRKIT_ASSERTS__SINK wins over a sink set in the file.
    """
    raw: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    raw = _deep_merge(raw, EnvSettingsSource(ErrkitConfig)())

    if level := os.environ.get("ERRKIT_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = level
    if fmt := os.environ.get("ERRKIT_LOG_FORMAT"):
        raw.setdefault("logging", {})["format"] = fmt

    return ErrkitConfig(**raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# ─── Active Config ────────────────────────────────────────────────

_active: ErrkitConfig | None = None


def get_config() -> ErrkitConfig:
    """Return the active configuration, building defaults on first use."""
    global _active
    if _active is None:
        _active = ErrkitConfig()
    return _active


def set_config(config: ErrkitConfig | None) -> None:
    """Install ``config`` as the active configuration. ``None`` resets to defaults."""
    global _active
    _active = config


def configure(config: ErrkitConfig | None = None) -> ErrkitConfig:
    """
    Install the configuration and set up structured logging from it.
    """
    from errkit.telemetry.logging import setup_logging

    config = config or load_config()
    set_config(config)
    setup_logging(config.logging)
    return config
