"""Tests for engine configuration and environment settings."""

import pytest

from adaptive_training.config.settings import Settings
from adaptive_training.engine.config import DEFAULT_CONFIG, EngineConfig


def test_defaults_match_documented_constants():
    assert DEFAULT_CONFIG.baseline_readiness == 80
    assert DEFAULT_CONFIG.deload_readiness_threshold == 40
    assert DEFAULT_CONFIG.volume_reduction_readiness_threshold == 60
    assert DEFAULT_CONFIG.load_progression_min_readiness == 40
    assert DEFAULT_CONFIG.load_rounding_increment == 2.5
    assert [rule.body_part for rule in DEFAULT_CONFIG.injury_rules] == ["knee", "shoulder", "back"]


def test_config_is_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.baseline_readiness = 50  # type: ignore[misc]


def test_settings_feed_engine_config(monkeypatch):
    monkeypatch.setenv("BASELINE_READINESS", "70")
    monkeypatch.setenv("DELOAD_READINESS_THRESHOLD", "30")
    monkeypatch.setenv("LOAD_ROUNDING_INCREMENT", "5")

    config = EngineConfig.from_settings(Settings())

    assert config.baseline_readiness == 70
    assert config.deload_readiness_threshold == 30
    assert config.volume_reduction_readiness_threshold == 60
    assert config.load_rounding_increment == 5.0
    assert config.injury_rules == DEFAULT_CONFIG.injury_rules


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert Settings().log_level == "INFO"


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings().log_level == "DEBUG"
