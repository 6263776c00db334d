"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Mocked ports (session provider, profile service, navigator)
- A form controller wired to those mocks
- Profile factories
"""

from unittest.mock import Mock

import pytest

from src.domain.models import Profile, Session
from src.domain.registration import RegistrationFormController


def make_profile(**overrides) -> Profile:
    """Profile for an unregistered student, with overrides applied."""
    fields = {
        "full_name": "A",
        "email": "a@x.com",
        "department": "CS",
        "roll_number": "1",
        "is_registered": False,
    }
    fields.update(overrides)
    return Profile(**fields)


@pytest.fixture
def session() -> Session:
    return Session(access_token="token-123", user_id="user-1", email="a@x.com")


@pytest.fixture
def session_provider(session: Session) -> Mock:
    provider = Mock()
    provider.get_current_session.return_value = session
    return provider


@pytest.fixture
def profile_service() -> Mock:
    service = Mock()
    service.fetch_profile.return_value = make_profile()
    return service


@pytest.fixture
def navigator() -> Mock:
    return Mock()


@pytest.fixture
def controller(
    session_provider: Mock, profile_service: Mock, navigator: Mock
) -> RegistrationFormController:
    return RegistrationFormController(
        session_provider=session_provider,
        profile_service=profile_service,
        navigator=navigator,
        login_path="/",
        ticket_path="/your-ticket",
    )


@pytest.fixture
def profile_factory():
    """Expose make_profile to tests as a fixture."""
    return make_profile
