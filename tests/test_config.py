import pytest
from pydantic import ValidationError

from net_timing.core.config import EstimatorOptions, Settings, resolve_options


def test_estimator_option_defaults():
    options = EstimatorOptions()
    assert options.force_coarse_estimates is False
    assert options.coarse_estimate_multiplier == 0.5


def test_merged_ignores_none_and_returns_copy():
    base = EstimatorOptions()
    merged = base.merged(force_coarse_estimates=True, coarse_estimate_multiplier=None)
    assert merged.force_coarse_estimates is True
    assert merged.coarse_estimate_multiplier == 0.5
    assert base.force_coarse_estimates is False
    assert base.merged() is base


def test_merged_rejects_unknown_options():
    with pytest.raises(TypeError, match="estimate_response_time"):
        EstimatorOptions().merged(estimate_response_time=True)


def test_multiplier_must_be_positive():
    with pytest.raises(ValueError):
        EstimatorOptions(coarse_estimate_multiplier=0)
    with pytest.raises(ValidationError):
        Settings(coarse_estimate_multiplier=-1)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("NET_TIMING_COARSE_ESTIMATE_MULTIPLIER", "0.75")
    monkeypatch.setenv("NET_TIMING_FORCE_COARSE_ESTIMATES", "true")
    options = EstimatorOptions.from_settings(Settings())
    assert options == EstimatorOptions(force_coarse_estimates=True, coarse_estimate_multiplier=0.75)


def test_resolve_options_prefers_explicit_options():
    explicit = EstimatorOptions(coarse_estimate_multiplier=0.2)
    assert resolve_options(explicit) is explicit
    assert resolve_options(explicit, force_coarse_estimates=True).coarse_estimate_multiplier == 0.2
