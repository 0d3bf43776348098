"""Tests for the numeric configuration."""

import dataclasses

import pytest

from xformkit.config import CONFIG, NUMERIC_CONFIG, NumericConfig, ToleranceSpec, XformConfig


class TestToleranceSpec:
    """Test ToleranceSpec validation and checks."""

    def test_is_within(self):
        """Test deviation checks ignore the sign."""
        spec = ToleranceSpec("test", 0.1)
        assert spec.is_within(0.05)
        assert spec.is_within(-0.1)
        assert not spec.is_within(0.2)

    def test_negative_value_raises(self):
        """Test negative tolerances are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            ToleranceSpec("bad", -1.0)

    def test_non_numeric_value_raises(self):
        """Test non-numeric tolerances are rejected."""
        with pytest.raises(ValueError, match="expected number"):
            ToleranceSpec("bad", "small")

    def test_frozen(self):
        """Test specs are immutable."""
        spec = ToleranceSpec("test", 0.1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.value = 0.2

    def test_repr(self):
        """Test repr shows name and value."""
        assert repr(ToleranceSpec("epsilon", 1e-6)) == "ToleranceSpec(epsilon, value=1e-06)"


class TestNumericConfig:
    """Test the default numeric thresholds."""

    def test_defaults(self):
        """Test default values."""
        assert CONFIG.numeric.epsilon.value == 1e-6
        assert CONFIG.numeric.parallel_threshold.value == 0.999999
        assert CONFIG.numeric.invariant_tolerance.value == 1e-4

    def test_shortcut(self):
        """Test NUMERIC_CONFIG is the singleton's section."""
        assert NUMERIC_CONFIG is CONFIG.numeric

    def test_get_spec(self):
        """Test lookup by name."""
        assert NUMERIC_CONFIG.get_spec("epsilon") is NUMERIC_CONFIG.epsilon

    def test_get_spec_unknown_raises(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown numeric tolerance"):
            NUMERIC_CONFIG.get_spec("missing")
        with pytest.raises(ValueError):
            NUMERIC_CONFIG.get_spec("get_all_specs")

    def test_get_all_specs(self):
        """Test every threshold is listed under its own name."""
        specs = XformConfig().get_all_specs()
        assert set(specs) == {"numeric"}
        for name, spec in specs["numeric"].items():
            assert spec.name == name

    def test_custom_config(self):
        """Test a config can be built with different thresholds."""
        config = XformConfig(numeric=NumericConfig(epsilon=ToleranceSpec("epsilon", 1e-3)))
        assert config.numeric.epsilon.value == 1e-3
        assert config.numeric.parallel_threshold.value == 0.999999
