"""Tests for the unified config schema (Pydantic models)."""

import pytest
from pydantic import ValidationError

from text_inserts.config_schema import (
    LoggingConfig,
    SyncConfig,
    TagsConfig,
    UnifiedConfig,
    build_config,
)


class TestDefaults:
    def test_zero_config_valid(self):
        cfg = UnifiedConfig()
        assert cfg.tags.prefix == ""
        assert cfg.tags.encoding is None
        assert cfg.sync.include == ["**/*"]
        assert cfg.sync.preserve_sub_path is True
        assert cfg.sync.mode == "if-different"
        assert cfg.logging.level == "INFO"
        assert cfg.logging.format == "text"

    def test_build_config_empty(self):
        assert build_config({}) == UnifiedConfig()


class TestBuildConfig:
    def test_partial_sections(self):
        cfg = build_config({"sync": {"destination": "out", "mode": "always"}})
        assert cfg.sync.destination == "out"
        assert cfg.sync.mode == "always"
        assert cfg.tags == TagsConfig()

    def test_all_sections(self):
        cfg = build_config(
            {
                "tags": {"prefix": "# ", "encoding": "latin-1"},
                "sync": {"include": ["**/*.swift"], "root": "templates"},
                "logging": {"level": "DEBUG", "format": "json"},
            }
        )
        assert cfg.tags.prefix == "# "
        assert cfg.sync.include == ["**/*.swift"]
        assert cfg.logging == LoggingConfig(level="DEBUG", format="json")

    def test_invalid_mode_rejected(self):
        with pytest.raises(ValidationError):
            build_config({"sync": {"mode": "sometimes"}})

    def test_invalid_log_format_rejected(self):
        with pytest.raises(ValidationError):
            build_config({"logging": {"format": "xml"}})

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_config({"sync": {"include": "not-a-list"}})


class TestFrozen:
    def test_sections_immutable(self):
        cfg = SyncConfig()
        with pytest.raises(ValidationError):
            cfg.destination = "elsewhere"
