"""
Domain entities - Session, profile, and the client-held draft.

Plain dataclasses with no framework dependencies. Wire formats are
parsed into these by the adapters.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Authenticated identity issued by the identity provider."""

    access_token: str
    user_id: str = ""
    email: str = ""


@dataclass(frozen=True)
class Profile:
    """
    Server-held record of a student's registration details and status.

    Read-only to the client; fetched once per page load.
    """

    full_name: str
    email: str
    department: str
    roll_number: str
    is_registered: bool = False
    guest_count: int | None = None
    guardian_1_name: str | None = None
    guardian_2_name: str | None = None


@dataclass(frozen=True)
class DraftRegistration:
    """Client-held guest/guardian portion of a registration."""

    guest_count: int | None = None
    guardian_1_name: str = ""
    guardian_2_name: str = ""

    def to_payload(self) -> dict[str, int | str | None]:
        """
        Build the submit body.

        Blank guardian names are sent as null.
        """
        return {
            "guest_count": self.guest_count,
            "guest_1_name": self.guardian_1_name.strip() or None,
            "guest_2_name": self.guardian_2_name.strip() or None,
        }
