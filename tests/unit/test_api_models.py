"""
Unit tests for API request/response models.

Tests Pydantic model validation for the form, guest preview, and ticket endpoints.
"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    FormView,
    GuestInputRequest,
    LoginView,
    RegisterRequest,
    TicketView,
)
from src.domain.models import Profile
from src.domain.ports import FormStatus, MessageKind
from src.domain.registration import RenderState


class TestRegisterRequest:
    """Tests for RegisterRequest model."""

    def test_string_guest_count(self) -> None:
        request = RegisterRequest(guest_count="2", guardian_1_name="A", guardian_2_name="B")
        assert request.guest_count == "2"

    def test_integer_guest_count(self) -> None:
        """Integer guest counts are accepted as sent."""
        request = RegisterRequest(guest_count=1, guardian_1_name="A")
        assert request.guest_count == 1
        assert request.guardian_2_name == ""

    def test_boolean_guest_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RegisterRequest(guest_count=True)

    def test_guest_count_required(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RegisterRequest()  # type: ignore[call-arg]
        assert "guest_count" in str(exc_info.value)

    def test_guardian_name_length_bounded(self) -> None:
        with pytest.raises(ValidationError):
            RegisterRequest(guest_count="1", guardian_1_name="a" * 201)


class TestGuestInputRequest:
    """Tests for GuestInputRequest model."""

    def test_defaults(self) -> None:
        request = GuestInputRequest()
        assert request.raw == ""
        assert request.guardian_1_name == ""

    def test_raw_length_bounded(self) -> None:
        with pytest.raises(ValidationError):
            GuestInputRequest(raw="1" * 33)


class TestFormView:
    """Tests for FormView model."""

    def _render(self, **overrides) -> RenderState:
        fields = {
            "status": FormStatus.LOCKED,
            "loading": False,
            "full_name": "A",
            "email": "a@x.com",
            "department": "CS",
            "roll_number": "1",
            "guest_count": 1,
            "guardian_1_name": "Parent One",
            "guardian_2_name": "",
            "show_guardian_1": True,
            "show_guardian_2": False,
            "read_only": True,
            "show_submit": False,
            "submit_enabled": False,
            "submit_label": "Register",
            "errors": {},
            "message": "Registration Data Loaded",
            "message_kind": MessageKind.INFO,
        }
        fields.update(overrides)
        return RenderState(**fields)

    def test_from_render(self) -> None:
        view = FormView.from_render(self._render(), None)
        assert view.status is FormStatus.LOCKED
        assert view.guardian_1_name == "Parent One"
        assert view.redirect_to is None

    def test_serializes_enums_as_strings(self) -> None:
        data = FormView.from_render(self._render(), "/your-ticket").model_dump(mode="json")
        assert data["status"] == "LOCKED"
        assert data["message_kind"] == "info"
        assert data["redirect_to"] == "/your-ticket"


class TestTicketView:
    """Tests for TicketView model."""

    def test_from_profile(self) -> None:
        profile = Profile(
            "A", "a@x.com", "CS", "1", is_registered=True, guest_count=1,
            guardian_1_name="Parent One",
        )
        view = TicketView.from_profile(profile)
        assert view.registered is True
        assert view.guest_count == 1
        assert view.guardian_1_name == "Parent One"
        assert view.guardian_2_name is None

    def test_redirect_hint(self) -> None:
        view = TicketView(registered=False, redirect_to="/form")
        assert view.full_name == ""
        assert view.redirect_to == "/form"


class TestLoginView:
    """Tests for LoginView model."""

    def test_error_optional(self) -> None:
        assert LoginView(authorize_url="https://x").error is None
