"""
Unit tests for API request/response models.

Tests Pydantic model validation for registration and config endpoints.
"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    ConfigResponse,
    ErrorResponse,
    RegisterRequest,
    RegistrationResponse,
    UpdateConfigRequest,
)


class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_referrer_optional(self) -> None:
        assert RegisterRequest().referrer is None

    def test_referrer_accepted(self) -> None:
        assert RegisterRequest(referrer="alice").referrer == "alice"

    def test_explicit_null_referrer(self) -> None:
        assert RegisterRequest.model_validate({"referrer": None}).referrer is None

    def test_empty_referrer_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest(referrer="")
        assert "referrer" in str(exc_info.value)


class TestUpdateConfigRequest:
    """Tests for UpdateConfigRequest model."""

    def test_deadline_required(self) -> None:
        with pytest.raises(ValidationError):
            UpdateConfigRequest()  # type: ignore[call-arg]

    def test_deadline_must_be_integer(self) -> None:
        with pytest.raises(ValidationError):
            UpdateConfigRequest(deadline="soon")  # type: ignore[arg-type]

    def test_negative_deadline_accepted(self) -> None:
        """Deadline values are not range-checked."""
        assert UpdateConfigRequest(deadline=-5).deadline == -5


class TestResponses:
    """Tests for response models."""

    def test_registration_response(self) -> None:
        response = RegistrationResponse(address="bob", referrer=None)
        assert response.model_dump() == {"address": "bob", "referrer": None}

    def test_config_response(self) -> None:
        response = ConfigResponse(admin="alice", deadline=1000)
        assert response.model_dump() == {"admin": "alice", "deadline": 1000}

    def test_error_response(self) -> None:
        assert ErrorResponse(detail="self-referral").detail == "self-referral"
