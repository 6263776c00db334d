"""
Domain layer - Pure form logic with zero framework imports.

This package contains the convocation registration form's state machine
and the guest/guardian validator. It defines its own port interfaces for
the identity provider, the profile service, and navigation.
"""

from .exceptions import (
    InvalidTransition,
    ProfileFetchFailed,
    RegistrationError,
    ServiceUnavailable,
)
from .models import DraftRegistration, Profile, Session
from .ports import (
    FormStatus,
    MessageKind,
    Navigator,
    ProfileService,
    SessionProvider,
    SubmitResponse,
    SubmitResult,
)
from .registration import FormState, RegistrationFormController, RenderState

__all__ = [
    "DraftRegistration",
    "FormState",
    "FormStatus",
    "InvalidTransition",
    "MessageKind",
    "Navigator",
    "Profile",
    "ProfileFetchFailed",
    "ProfileService",
    "RegistrationError",
    "RegistrationFormController",
    "RenderState",
    "ServiceUnavailable",
    "Session",
    "SessionProvider",
    "SubmitResponse",
    "SubmitResult",
]
