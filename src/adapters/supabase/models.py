"""
Wire models for the Supabase edge functions and auth endpoints.

Pydantic models that parse remote payloads before they are turned into
domain entities. The profile read accepts both guardian key spellings
the functions have used (``guardian1`` and ``guest_1_name``).
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from src.domain.models import Profile, Session


class ProfilePayload(BaseModel):
    """Response body of get-student-info-by-auth."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str | None = None
    email: str | None = None
    roll_no: str | None = None
    dept: str | None = None
    is_registered: bool = False
    guest_count: int | None = None
    guardian_1_name: str | None = Field(
        default=None, validation_alias=AliasChoices("guest_1_name", "guardian1")
    )
    guardian_2_name: str | None = Field(
        default=None, validation_alias=AliasChoices("guest_2_name", "guardian2")
    )

    def to_profile(self) -> Profile:
        return Profile(
            full_name=self.name or "",
            email=self.email or "",
            department=self.dept or "",
            roll_number=self.roll_no or "",
            is_registered=self.is_registered,
            guest_count=self.guest_count,
            guardian_1_name=self.guardian_1_name,
            guardian_2_name=self.guardian_2_name,
        )


class ErrorPayload(BaseModel):
    """Error body returned by the functions on non-2xx responses."""

    model_config = ConfigDict(extra="ignore")

    error: str | None = None


class UserPayload(BaseModel):
    """Subset of the auth ``/user`` response used to build a Session."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    email: str | None = None

    def to_session(self, access_token: str) -> Session:
        return Session(access_token=access_token, user_id=self.id, email=self.email or "")
