"""
Configuration tests for milankovitch

Tests environment variables:
- MILANKOVITCH_WARN_EXTRAPOLATION: Warn for years outside the accuracy bound
- MILANKOVITCH_ACCURACY_BOUND: Accuracy bound in years
"""

import os
import warnings
from unittest.mock import patch

import pytest

from milankovitch import config
from milankovitch.config import DEFAULT_ACCURACY_BOUND, _ConfigState

# =============================================================================
# Test: MILANKOVITCH_WARN_EXTRAPOLATION
# =============================================================================


class TestEnvWarnExtrapolation:
    """Test MILANKOVITCH_WARN_EXTRAPOLATION environment variable"""

    @pytest.mark.parametrize("value", ['1', 'true', 'yes', 'TRUE', 'Yes'])
    def test_enabled(self, value):
        """Truthy values enable the warning"""
        with patch.dict(os.environ, {'MILANKOVITCH_WARN_EXTRAPOLATION': value}):
            state = _ConfigState()
            assert state.warn_extrapolation is True

    @pytest.mark.parametrize("value", ['', '0', 'false', 'no', 'maybe'])
    def test_disabled(self, value):
        """Other values leave the warning off"""
        with patch.dict(os.environ, {'MILANKOVITCH_WARN_EXTRAPOLATION': value}):
            state = _ConfigState()
            assert state.warn_extrapolation is False

    def test_unset(self):
        """Warning is off without the variable"""
        env = {k: v for k, v in os.environ.items()
               if k != 'MILANKOVITCH_WARN_EXTRAPOLATION'}
        with patch.dict(os.environ, env, clear=True):
            state = _ConfigState()
            assert state.warn_extrapolation is False


# =============================================================================
# Test: MILANKOVITCH_ACCURACY_BOUND
# =============================================================================


class TestEnvAccuracyBound:
    """Test MILANKOVITCH_ACCURACY_BOUND environment variable"""

    def test_default(self):
        with patch.dict(os.environ, {'MILANKOVITCH_ACCURACY_BOUND': ''}):
            state = _ConfigState()
            assert state.accuracy_bound == DEFAULT_ACCURACY_BOUND == 1_000_000

    def test_custom(self):
        with patch.dict(os.environ, {'MILANKOVITCH_ACCURACY_BOUND': '250000'}):
            state = _ConfigState()
            assert state.accuracy_bound == 250_000

    @pytest.mark.parametrize("value", ['abc', '0', '-5', '1.5'])
    def test_invalid(self, value):
        """Invalid bounds fall back to the default with a warning"""
        with patch.dict(os.environ, {'MILANKOVITCH_ACCURACY_BOUND': value}):
            with pytest.warns(UserWarning, match='MILANKOVITCH_ACCURACY_BOUND'):
                state = _ConfigState()
            assert state.accuracy_bound == DEFAULT_ACCURACY_BOUND


# =============================================================================
# Test: Runtime API
# =============================================================================


class TestRuntimeConfig:
    """Test runtime configuration functions"""

    def test_enable_disable(self):
        config.enable_extrapolation_warning()
        assert config.is_extrapolation_warning_enabled() is True
        config.disable_extrapolation_warning()
        assert config.is_extrapolation_warning_enabled() is False

    def test_context_manager(self):
        config.disable_extrapolation_warning()
        with config.extrapolation_warning():
            assert config.is_extrapolation_warning_enabled() is True
        assert config.is_extrapolation_warning_enabled() is False

    def test_context_manager_disable(self):
        config.enable_extrapolation_warning()
        with config.extrapolation_warning(enabled=False):
            assert config.is_extrapolation_warning_enabled() is False
        assert config.is_extrapolation_warning_enabled() is True

    def test_context_manager_restores_on_error(self):
        config.disable_extrapolation_warning()
        with pytest.raises(RuntimeError):
            with config.extrapolation_warning():
                raise RuntimeError("boom")
        assert config.is_extrapolation_warning_enabled() is False

    def test_accuracy_bound(self):
        config.set_accuracy_bound(500_000)
        assert config.get_accuracy_bound() == 500_000

    @pytest.mark.parametrize("value", [0, -1])
    def test_accuracy_bound_invalid(self, value):
        with pytest.raises(ValueError, match='positive'):
            config.set_accuracy_bound(value)

    def test_warning_category(self):
        assert issubclass(config.ExtrapolationWarning, UserWarning)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            warnings.warn('test', config.ExtrapolationWarning)
        assert caught[0].category is config.ExtrapolationWarning
