"""
Guest and guardian validation - Pure functions over raw form input.

Translates keystrokes into bounded domain values plus per-field error
messages, and derives which guardian fields a guest count requires.
"""

import re
from dataclasses import dataclass, replace

from .models import DraftRegistration, Profile
from .ports import FormStatus

MAX_GUESTS = 2
MAX_GUARDIAN_NAME_LENGTH = 100

GUARDIAN_1 = "guardian_1_name"
GUARDIAN_2 = "guardian_2_name"

_NON_DIGITS = re.compile(r"[^0-9]")
_NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")


@dataclass(frozen=True)
class GuestInput:
    """Validated guest count and the error to show next to the field."""

    value: int | None
    error: str | None = None


@dataclass(frozen=True)
class GuardianRequirements:
    """Which guardian fields are shown (and therefore required)."""

    show_guardian_1: bool
    show_guardian_2: bool


def guest_range_error(max_guests: int = MAX_GUESTS) -> str:
    """Error text for a guest count outside [0, max_guests]."""
    return f"Number of guests must be between 0 and {max_guests}."


def validate_guest_input(raw: str, max_guests: int = MAX_GUESTS) -> GuestInput:
    """
    Validate a raw guest-count keystroke.

    Strips every non-digit character and keeps a single digit.

    Args:
        raw: Text as typed by the user
        max_guests: Inclusive upper bound

    Returns:
        GuestInput(None, None) for empty input,
        GuestInput(None, error) when out of range,
        GuestInput(value, None) otherwise
    """
    digits = _NON_DIGITS.sub("", raw or "")[:1]
    if digits == "":
        return GuestInput(value=None)
    return validate_guest_count(int(digits), max_guests)


def validate_guest_count(count: int, max_guests: int = MAX_GUESTS) -> GuestInput:
    """
    Validate a guest count that arrived as a number.

    The value is range-checked as-is; no digits are stripped, so -1 or 10
    are rejected rather than read as 1.
    """
    if not is_guest_count_valid(count, max_guests):
        return GuestInput(value=None, error=guest_range_error(max_guests))
    return GuestInput(value=count)


def derive_guardian_requirements(guest_count: int | None) -> GuardianRequirements:
    """Guardian 1 for one or two guests, guardian 2 only for two."""
    return GuardianRequirements(
        show_guardian_1=guest_count in (1, 2),
        show_guardian_2=guest_count == 2,
    )


def apply_guest_count(
    draft: DraftRegistration, guest_count: int | None
) -> DraftRegistration:
    """
    Set the draft's guest count, clearing guardian fields that are now hidden.

    Hidden guardian values must never be submitted.
    """
    requirements = derive_guardian_requirements(guest_count)
    return replace(
        draft,
        guest_count=guest_count,
        guardian_1_name=draft.guardian_1_name if requirements.show_guardian_1 else "",
        guardian_2_name=draft.guardian_2_name if requirements.show_guardian_2 else "",
    )


def validate_guardian_name(name: str) -> str | None:
    """Return an error message for a required guardian name, or None."""
    value = (name or "").strip()
    if value == "":
        return "Guardian name is required."
    if len(value) > MAX_GUARDIAN_NAME_LENGTH:
        return f"Guardian name must be at most {MAX_GUARDIAN_NAME_LENGTH} characters."
    if not _NAME_PATTERN.match(value):
        return "Guardian name must only contain letters and spaces."
    return None


def guardian_errors(draft: DraftRegistration) -> dict[str, str]:
    """Per-field errors for the guardian fields the draft currently requires."""
    requirements = derive_guardian_requirements(draft.guest_count)
    errors: dict[str, str] = {}

    if requirements.show_guardian_1:
        error = validate_guardian_name(draft.guardian_1_name)
        if error:
            errors[GUARDIAN_1] = error
    if requirements.show_guardian_2:
        error = validate_guardian_name(draft.guardian_2_name)
        if error:
            errors[GUARDIAN_2] = error
    return errors


def is_guest_count_valid(guest_count: int | None, max_guests: int = MAX_GUESTS) -> bool:
    """True for an integer (not bool) within [0, max_guests]."""
    return (
        isinstance(guest_count, int)
        and not isinstance(guest_count, bool)
        and 0 <= guest_count <= max_guests
    )


def is_submittable(
    profile: Profile | None,
    draft: DraftRegistration,
    status: FormStatus = FormStatus.EDITABLE,
    max_guests: int = MAX_GUESTS,
) -> bool:
    """
    Decide whether the submit action is enabled.

    True iff the profile fields are all present, the guest count is valid,
    every required guardian name is valid, the student is not registered,
    and the form is neither loading nor submitting.
    """
    if profile is None or profile.is_registered:
        return False
    if status is not FormStatus.EDITABLE:
        return False
    if not all(
        (profile.full_name, profile.email, profile.roll_number, profile.department)
    ):
        return False
    if not is_guest_count_valid(draft.guest_count, max_guests):
        return False
    return not guardian_errors(draft)
