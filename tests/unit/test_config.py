"""
Tests for configuration loading and the active configuration.
"""

from __future__ import annotations

import pydantic
import pytest

from errkit.config import (
    DisplayConfig,
    ErrkitConfig,
    configure,
    get_config,
    load_config,
    set_config,
)


class TestLoadConfig:
    def test_defaults(self):
        config = load_config()
        assert config.logging.level == "INFO"
        assert config.logging.format == "console"
        assert config.display.frame_separator == " <- "
        assert config.display.timestamp_format == "iso"
        assert config.asserts.sink == "stderr"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.yaml")
        assert config.asserts.sink == "stderr"

    def test_yaml(self, tmp_path):
        path = tmp_path / "errkit.yaml"
        path.write_text(
            "logging:\n"
            "  level: DEBUG\n"
            "display:\n"
            "  frame_separator: ' > '\n"
            "asserts:\n"
            "  sink: none\n"
        )
        config = load_config(path)
        assert config.logging.level == "DEBUG"
        assert config.display.frame_separator == " > "
        assert config.asserts.sink == "none"

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "errkit.yaml"
        path.write_text("")
        assert load_config(path).logging.level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("ERRKIT_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("ERRKIT_ASSERTS__SINK", "stdout")
        config = load_config()
        assert config.logging.level == "WARNING"
        assert config.asserts.sink == "stdout"

    def test_env_beats_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "errkit.yaml"
        path.write_text(
            "display:\n"
            "  frame_separator: ' > '\n"
            "  timestamp_format: '%Y'\n"
            "asserts:\n"
            "  sink: none\n"
        )
        monkeypatch.setenv("ERRKIT_ASSERTS__SINK", "stdout")
        monkeypatch.setenv("ERRKIT_DISPLAY__FRAME_SEPARATOR", " | ")

        config = load_config(path)

        assert config.asserts.sink == "stdout"
        assert config.display.frame_separator == " | "
        # Keys the environment leaves alone keep their YAML value.
        assert config.display.timestamp_format == "%Y"

    def test_invalid_sink_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            ErrkitConfig(asserts={"sink": "syslog"})

    def test_empty_separator_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            DisplayConfig(frame_separator="")


class TestActiveConfig:
    def test_get_builds_defaults_once(self):
        assert get_config() is get_config()

    def test_set_and_reset(self):
        config = ErrkitConfig(display=DisplayConfig(frame_separator=" | "))
        set_config(config)
        assert get_config() is config
        set_config(None)
        assert get_config() is not config

    def test_configure_installs(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            "errkit.telemetry.logging.setup_logging",
            lambda cfg: calls.append(cfg),
        )
        config = ErrkitConfig()
        assert configure(config) is config
        assert get_config() is config
        assert calls == [config.logging]
