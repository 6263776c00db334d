"""
Domain exceptions - Semantic error types for convocation registration.

This module defines domain-specific exceptions that communicate
failures of the registration flow without leaking transport details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ProfileFetchFailed(RegistrationError):
    """Profile could not be loaded (network, parse, or non-success response)."""

    pass


class ServiceUnavailable(RegistrationError):
    """Registration service unreachable or timed out during submit."""

    pass


class InvalidTransition(RegistrationError):
    """Form state machine was asked to move along an edge it does not have."""

    pass
