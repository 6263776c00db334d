"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the registration form
requires from the outside world. Adapters implement these protocols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .models import DraftRegistration, Profile, Session


class FormStatus(str, Enum):
    """
    Registration form states.

    State Transitions:
    - LOADING -> EDITABLE (profile fetched, not yet registered)
    - LOADING -> LOCKED (profile fetched, already registered)
    - LOADING -> FATAL_ERROR (profile fetch failed)
    - EDITABLE -> SUBMITTING (submit accepted)
    - SUBMITTING -> LOCKED (server reports already registered)
    - SUBMITTING -> EDITABLE (submit failed, retry allowed)

    Terminal States:
    - LOCKED: Server is the sole source of truth, inputs read-only
    - FATAL_ERROR: Session signed out, user sent back to login
    """

    LOADING = "LOADING"
    EDITABLE = "EDITABLE"
    SUBMITTING = "SUBMITTING"
    LOCKED = "LOCKED"
    FATAL_ERROR = "FATAL_ERROR"


class SubmitResult(Enum):
    """Outcome of a registration submit call."""

    SUCCESS = "success"
    CONFLICT = "conflict"
    FAILED = "failed"


class MessageKind(str, Enum):
    """How a form-level message is presented."""

    INFO = "info"
    ERROR = "error"


@dataclass(frozen=True)
class SubmitResponse:
    """Submit outcome plus the server-provided message, if any."""

    result: SubmitResult
    message: str = ""


class SessionProvider(Protocol):
    """Port interface for the identity provider's session."""

    def get_current_session(self) -> Session | None:
        """
        Look up the caller's current session.

        Returns:
            Session if the caller is signed in, None otherwise
        """
        ...

    def sign_out(self) -> None:
        """End the caller's session with the provider."""
        ...

    def sign_in_with_oauth(self, provider: str, redirect_to: str) -> str:
        """
        Build the provider URL that starts an OAuth sign-in.

        Args:
            provider: OAuth provider name (e.g. "google")
            redirect_to: Where the provider sends the user back to

        Returns:
            Absolute authorize URL
        """
        ...


class ProfileService(Protocol):
    """Port interface for the remote student profile functions."""

    def fetch_profile(self, session: Session) -> Profile:
        """
        Fetch the caller's profile and registration status.

        Raises:
            ProfileFetchFailed: On network, parse, or non-success response
        """
        ...

    def submit_registration(
        self, session: Session, draft: DraftRegistration
    ) -> SubmitResponse:
        """
        Persist a registration for the caller.

        Return values by scenario:
        - SUCCESS: any 2xx response
        - CONFLICT: 409, caller is already registered
        - FAILED: any other response, message carries the server text

        Raises:
            ServiceUnavailable: Network failure or timeout
        """
        ...


class Navigator(Protocol):
    """Port interface for moving the user to another page."""

    def navigate(self, target: str) -> None:
        """Send the user to ``target`` (a path, optionally with a query)."""
        ...
