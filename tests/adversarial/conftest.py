"""
Shared fixtures for adversarial tests.

Provides a controller already mounted on an editable form, ready for
abuse-path scenarios (repeated submits, hostile keystrokes).
"""

from unittest.mock import Mock

import pytest

from src.domain.registration import RegistrationFormController

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def editable_controller(
    controller: RegistrationFormController, profile_service: Mock
) -> RegistrationFormController:
    """Controller mounted for an unregistered student."""
    controller.mount()
    return controller
