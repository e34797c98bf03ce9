"""Tests for exception classes."""

import pytest

from iowalk.exceptions import ConfigurationError, IowalkError, ValidationError


class TestValidationError:
    """Test ValidationError class."""

    def test_basic_initialization(self):
        """Test basic error initialization."""
        error = ValidationError("Invalid input")
        assert error.message == "Invalid input"
        assert error.target is None
        assert str(error) == "Validation failed: Invalid input"

    def test_initialization_with_target(self):
        """Test initialization with target parameter."""
        error = ValidationError("must be positive", target="batch_size")
        assert error.target == "batch_size"
        assert str(error) == "Validation failed for 'batch_size': must be positive"

    def test_raise_and_catch_as_base(self):
        """Test that ValidationError is caught as IowalkError."""
        with pytest.raises(IowalkError) as exc_info:
            raise ValidationError("bad", target="count")

        assert exc_info.value.target == "count"


class TestConfigurationError:
    """Test ConfigurationError class."""

    def test_prefix(self):
        """Test configuration errors carry their own prefix."""
        error = ConfigurationError("expected an integer", target="staging.x")
        assert str(error) == (
            "Configuration error for 'staging.x': expected an integer"
        )

    def test_distinct_from_validation_error(self):
        """Test the two error types are distinct."""
        assert not isinstance(ConfigurationError("x"), ValidationError)
        assert isinstance(ConfigurationError("x"), IowalkError)
