"""Tests for analysis configuration validation."""

import pytest
from pydantic import ValidationError

from keno_analytics.config import AnalysisConfig, Settings


def test_defaults():
    config = AnalysisConfig()
    assert (config.trend_weight, config.gap_weight, config.hot_cold_weight) == (0.4, 0.3, 0.3)
    assert config.trend_window == 10
    assert config.hot_cold_window == 20
    assert config.recent_weight == 2


def test_weights_must_sum_to_one():
    with pytest.raises(ValidationError):
        AnalysisConfig(trend_weight=0.5)


def test_windows_must_be_positive():
    with pytest.raises(ValidationError):
        AnalysisConfig(trend_window=0)


def test_combo_bounds():
    with pytest.raises(ValidationError):
        AnalysisConfig(combo_min_size=4, combo_max_size=3)


def test_nested_env_override(monkeypatch):
    monkeypatch.setenv("ANALYSIS__TREND_WINDOW", "15")
    monkeypatch.setenv("LOCATIONS", '["omaha"]')
    s = Settings(_env_file=None)
    assert s.ANALYSIS.trend_window == 15
    assert s.LOCATIONS == ["omaha"]


def test_pool_size_cannot_exceed_keno_pool():
    with pytest.raises(ValidationError):
        AnalysisConfig(pool_size=81)
