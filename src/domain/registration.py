"""
Registration form controller - Form state machine implementation.

This module contains the orchestration logic for the convocation
registration form: session check, profile fetch, local draft edits,
validation, submit, and navigation.

Form State Machine
==================

States:
- LOADING: Initial state, profile fetch pending
- EDITABLE: Student not yet registered, draft may be edited
- SUBMITTING: Submit request outstanding
- LOCKED: Terminal, server reports the student as registered
- FATAL_ERROR: Terminal, profile fetch failed and the session was ended

Valid Transitions:
    LOADING    -> EDITABLE     (is_registered = false)
    LOADING    -> LOCKED       (is_registered = true)
    LOADING    -> FATAL_ERROR  (fetch failed)
    EDITABLE   -> SUBMITTING   (submit accepted)
    SUBMITTING -> LOCKED       (409, already registered)
    SUBMITTING -> EDITABLE     (any other failure, retry allowed)

A successful submit navigates to the ticket view and leaves the status
at SUBMITTING, so a second activation stays a no-op.
"""

import logging
from dataclasses import dataclass, field, replace
from urllib.parse import urlencode

from .exceptions import InvalidTransition, ProfileFetchFailed, ServiceUnavailable
from .models import DraftRegistration, Profile
from .ports import (
    FormStatus,
    MessageKind,
    Navigator,
    ProfileService,
    SessionProvider,
    SubmitResult,
)
from .validation import (
    GUARDIAN_1,
    GUARDIAN_2,
    MAX_GUESTS,
    apply_guest_count,
    derive_guardian_requirements,
    guardian_errors,
    guest_range_error,
    is_submittable,
    validate_guest_count,
    validate_guest_input,
)

logger = logging.getLogger(__name__)

GUEST_COUNT = "guest_count"

DATA_LOADED_MESSAGE = "Registration Data Loaded"
ALREADY_REGISTERED_MESSAGE = "You are already registered."
SUBMIT_FAILED_MESSAGE = "Registration failed."
PROFILE_FAILED_MESSAGE = "Unable to load your profile."

_TRANSITIONS: dict[FormStatus, frozenset[FormStatus]] = {
    FormStatus.LOADING: frozenset(
        {FormStatus.EDITABLE, FormStatus.LOCKED, FormStatus.FATAL_ERROR}
    ),
    FormStatus.EDITABLE: frozenset({FormStatus.SUBMITTING}),
    FormStatus.SUBMITTING: frozenset({FormStatus.LOCKED, FormStatus.EDITABLE}),
    FormStatus.LOCKED: frozenset(),
    FormStatus.FATAL_ERROR: frozenset(),
}


@dataclass
class FormState:
    """The single mutable state value of a registration form."""

    status: FormStatus = FormStatus.LOADING
    profile: Profile | None = None
    draft: DraftRegistration = field(default_factory=DraftRegistration)
    errors: dict[str, str] = field(default_factory=dict)
    message: str | None = None
    message_kind: MessageKind | None = None


@dataclass(frozen=True)
class RenderState:
    """Everything a view needs, derived once from FormState."""

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


@dataclass
class RegistrationFormController:
    """
    Drives one registration form from mount to navigation.

    Collaborators are injected so the controller runs without a live
    network. One instance corresponds to one page mount.
    """

    session_provider: SessionProvider
    profile_service: ProfileService
    navigator: Navigator
    login_path: str = "/"
    ticket_path: str = "/your-ticket"
    max_guests: int = MAX_GUESTS
    state: FormState = field(default_factory=FormState)
    _mounted: bool = field(default=False, init=False, repr=False)

    def mount(self) -> FormStatus:
        """
        Check the session, fetch the profile, and settle the form state.

        Only the first call does any work; a profile is fetched at most
        once per controller.

        Returns:
            Status after mounting (LOADING if the user was sent to login)
        """
        if self._mounted:
            return self.state.status
        self._mounted = True

        session = self.session_provider.get_current_session()
        if session is None:
            self.navigator.navigate(self.login_path)
            return self.state.status

        try:
            profile = self.profile_service.fetch_profile(session)
        except ProfileFetchFailed as exc:
            message = exc.message or PROFILE_FAILED_MESSAGE
            logger.warning("Profile fetch failed, signing out: %s", message)
            self.session_provider.sign_out()
            self._transition(FormStatus.FATAL_ERROR)
            self._set_message(message, MessageKind.ERROR)
            self.navigator.navigate(self._login_with_error(message))
            return self.state.status

        self.state.profile = profile
        if profile.is_registered:
            self.state.draft = DraftRegistration(
                guest_count=profile.guest_count if profile.guest_count is not None else 0,
                guardian_1_name=profile.guardian_1_name or "",
                guardian_2_name=profile.guardian_2_name or "",
            )
            self._transition(FormStatus.LOCKED)
            self._set_message(DATA_LOADED_MESSAGE, MessageKind.INFO)
        else:
            self.state.draft = DraftRegistration()
            self._transition(FormStatus.EDITABLE)
        return self.state.status

    def change_guest_count(self, raw: str | int) -> None:
        """
        Apply a guest count; hidden guardian fields are cleared.

        Text is treated as a keystroke (non-digits stripped, one digit kept).
        An integer is range-checked as-is.
        """
        if self.state.status is not FormStatus.EDITABLE:
            return

        if isinstance(raw, str):
            result = validate_guest_input(raw, self.max_guests)
        else:
            result = validate_guest_count(raw, self.max_guests)
        self.state.draft = apply_guest_count(self.state.draft, result.value)

        errors = {
            key: value
            for key, value in self.state.errors.items()
            if key != GUEST_COUNT and self._field_visible(key)
        }
        if result.error:
            errors[GUEST_COUNT] = result.error
        self.state.errors = errors

    def change_guardian_name(self, slot: int, name: str) -> None:
        """Edit guardian 1 or 2; ignored while that field is hidden."""
        if self.state.status is not FormStatus.EDITABLE:
            return
        if slot not in (1, 2):
            raise ValueError(f"Unknown guardian slot: {slot}")

        key = GUARDIAN_1 if slot == 1 else GUARDIAN_2
        if not self._field_visible(key):
            return

        self.state.draft = replace(self.state.draft, **{key: name})
        self.state.errors.pop(key, None)

    def submit(self) -> None:
        """
        Submit the draft.

        A no-op unless the form is EDITABLE, which makes re-entrant
        activations while a request is outstanding harmless.
        """
        if self.state.status is not FormStatus.EDITABLE:
            return

        if not self.is_submittable():
            self._record_inline_errors()
            return

        # Session may have expired since mount.
        session = self.session_provider.get_current_session()
        if session is None:
            self.navigator.navigate(self.login_path)
            return

        self._transition(FormStatus.SUBMITTING)
        self._clear_message()

        try:
            response = self.profile_service.submit_registration(session, self.state.draft)
        except ServiceUnavailable as exc:
            self._transition(FormStatus.EDITABLE)
            self._set_message(exc.message or SUBMIT_FAILED_MESSAGE, MessageKind.ERROR)
            return

        if response.result is SubmitResult.SUCCESS:
            logger.info("Registration submitted, guests=%s", self.state.draft.guest_count)
            self.navigator.navigate(self.ticket_path)
        elif response.result is SubmitResult.CONFLICT:
            self._transition(FormStatus.LOCKED)
            self._set_message(response.message or ALREADY_REGISTERED_MESSAGE, MessageKind.INFO)
        else:
            self._transition(FormStatus.EDITABLE)
            self._set_message(response.message or SUBMIT_FAILED_MESSAGE, MessageKind.ERROR)

    def is_submittable(self) -> bool:
        """Whether the submit control is enabled for the current state."""
        return is_submittable(
            self.state.profile, self.state.draft, self.state.status, self.max_guests
        )

    def render(self) -> RenderState:
        """Derive the view state from the current form state."""
        state = self.state
        profile = state.profile
        requirements = derive_guardian_requirements(state.draft.guest_count)
        loading = state.status is FormStatus.LOADING
        submitting = state.status is FormStatus.SUBMITTING

        return RenderState(
            status=state.status,
            loading=loading,
            full_name=profile.full_name if profile else "",
            email=profile.email if profile else "",
            department=profile.department if profile else "",
            roll_number=profile.roll_number if profile else "",
            guest_count=state.draft.guest_count,
            guardian_1_name=state.draft.guardian_1_name,
            guardian_2_name=state.draft.guardian_2_name,
            show_guardian_1=requirements.show_guardian_1,
            show_guardian_2=requirements.show_guardian_2,
            read_only=state.status is not FormStatus.EDITABLE,
            show_submit=state.status in (FormStatus.EDITABLE, FormStatus.SUBMITTING),
            submit_enabled=self.is_submittable(),
            submit_label="Processing..." if submitting else "Register",
            errors=dict(state.errors),
            message=state.message,
            message_kind=state.message_kind,
        )

    def _transition(self, target: FormStatus) -> None:
        current = self.state.status
        if target not in _TRANSITIONS[current]:
            raise InvalidTransition(f"{current.value} -> {target.value}")
        logger.debug("Form transition %s -> %s", current.value, target.value)
        self.state.status = target

    def _set_message(self, text: str, kind: MessageKind) -> None:
        self.state.message = text
        self.state.message_kind = kind

    def _clear_message(self) -> None:
        self.state.message = None
        self.state.message_kind = None

    def _field_visible(self, key: str) -> bool:
        requirements = derive_guardian_requirements(self.state.draft.guest_count)
        if key == GUARDIAN_1:
            return requirements.show_guardian_1
        if key == GUARDIAN_2:
            return requirements.show_guardian_2
        return True

    def _record_inline_errors(self) -> None:
        errors = dict(self.state.errors)
        if self.state.draft.guest_count is None:
            errors[GUEST_COUNT] = guest_range_error(self.max_guests)
        errors.update(guardian_errors(self.state.draft))
        self.state.errors = errors

    def _login_with_error(self, message: str) -> str:
        return f"{self.login_path}?{urlencode({'error': message})}"
