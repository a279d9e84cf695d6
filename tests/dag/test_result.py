"""Tests for ValidationResult."""

import pytest
from pydantic import ValidationError

from dagkit.dag import ValidationResult


@pytest.mark.short
class TestValidationResult:
    def test_success(self):
        result = ValidationResult.success()

        assert result.successful is True
        assert result.message is None
        assert bool(result)
        assert ValidationResult.success() is result

    def test_failure(self):
        result = ValidationResult.failure("Added a cycle.")

        assert result.successful is False
        assert result.message == "Added a cycle."
        assert not result

    def test_equality(self):
        assert ValidationResult.failure("x") == ValidationResult(
            successful=False, message="x"
        )

    def test_frozen(self):
        result = ValidationResult.failure("x")

        with pytest.raises(ValidationError):
            result.successful = True
