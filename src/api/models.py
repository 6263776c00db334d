"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt, StringConstraints

from src.domain.models import Profile
from src.domain.ports import FormStatus, MessageKind
from src.domain.registration import RenderState


class LoginView(BaseModel):
    """Login page data: where to start OAuth and any carried error."""

    authorize_url: str
    error: str | None = None


class GuestInputRequest(BaseModel):
    """Request model for a guest-count keystroke preview."""

    raw: str = Field("", max_length=32, description="Guest count as typed")
    guardian_1_name: str = Field("", max_length=200)
    guardian_2_name: str = Field("", max_length=200)


class GuestInputResponse(BaseModel):
    """Validated guest count and the guardian fields it requires."""

    guest_count: int | None
    error: str | None
    show_guardian_1: bool
    show_guardian_2: bool
    guardian_1_name: str
    guardian_2_name: str


class RegisterRequest(BaseModel):
    """Request model for registration submit."""

    guest_count: StrictInt | Annotated[str, StringConstraints(max_length=32)] = Field(
        ...,
        description="Number of guests (0-2). A number is range-checked as-is; "
        "text is read as typed, with non-digits stripped",
    )
    guardian_1_name: str = Field("", max_length=200)
    guardian_2_name: str = Field("", max_length=200)


class FormView(BaseModel):
    """Response model for the registration form."""

    status: FormStatus
    loading: bool
    full_name: str
    email: str
    department: str
    roll_number: str
    guest_count: int | None
    guardian_1_name: str
    guardian_2_name: str
    show_guardian_1: bool
    show_guardian_2: bool
    read_only: bool
    show_submit: bool
    submit_enabled: bool
    submit_label: str
    errors: dict[str, str]
    message: str | None
    message_kind: MessageKind | None
    redirect_to: str | None = None

    @classmethod
    def from_render(cls, render: RenderState, redirect_to: str | None) -> "FormView":
        return cls(
            status=render.status,
            loading=render.loading,
            full_name=render.full_name,
            email=render.email,
            department=render.department,
            roll_number=render.roll_number,
            guest_count=render.guest_count,
            guardian_1_name=render.guardian_1_name,
            guardian_2_name=render.guardian_2_name,
            show_guardian_1=render.show_guardian_1,
            show_guardian_2=render.show_guardian_2,
            read_only=render.read_only,
            show_submit=render.show_submit,
            submit_enabled=render.submit_enabled,
            submit_label=render.submit_label,
            errors=render.errors,
            message=render.message,
            message_kind=render.message_kind,
            redirect_to=redirect_to,
        )


class TicketView(BaseModel):
    """Response model for the registration confirmation."""

    registered: bool
    full_name: str = ""
    email: str = ""
    department: str = ""
    roll_number: str = ""
    guest_count: int | None = None
    guardian_1_name: str | None = None
    guardian_2_name: str | None = None
    redirect_to: str | None = None

    @classmethod
    def from_profile(cls, profile: Profile) -> "TicketView":
        return cls(
            registered=True,
            full_name=profile.full_name,
            email=profile.email,
            department=profile.department,
            roll_number=profile.roll_number,
            guest_count=profile.guest_count,
            guardian_1_name=profile.guardian_1_name,
            guardian_2_name=profile.guardian_2_name,
        )
