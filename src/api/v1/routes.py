"""
API v1 routes.

Defines REST endpoints for the convocation registration front-end.
"""

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import RedirectResponse

from src.adapters.supabase.session import SupabaseSessionProvider
from src.adapters.web.navigator import RecordingNavigator
from src.api.dependencies import get_form_controller, get_navigator, get_session_provider
from src.api.models import (
    FormView,
    GuestInputRequest,
    GuestInputResponse,
    LoginView,
    RegisterRequest,
    TicketView,
)
from src.config.settings import Settings, get_settings
from src.domain.models import DraftRegistration
from src.domain.ports import FormStatus
from src.domain.registration import RegistrationFormController
from src.domain.validation import (
    apply_guest_count,
    derive_guardian_requirements,
    validate_guest_input,
)

router = APIRouter(tags=["v1"])


@router.get(
    "/login",
    response_model=LoginView,
    summary="Login page data",
    description="Returns the OAuth authorize URL and any error carried back "
    "from a failed profile load.",
)
def login(
    error: str | None = Query(None, max_length=500),
    session_provider: SupabaseSessionProvider = Depends(get_session_provider),
    settings: Settings = Depends(get_settings),
) -> LoginView:
    authorize_url = session_provider.sign_in_with_oauth(
        settings.oauth_provider, settings.oauth_redirect_url
    )
    return LoginView(authorize_url=authorize_url, error=error)


@router.get(
    "/login/oauth",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    summary="Start OAuth sign-in",
    description="Redirects to the identity provider's authorize endpoint.",
)
def login_oauth(
    session_provider: SupabaseSessionProvider = Depends(get_session_provider),
    settings: Settings = Depends(get_settings),
) -> RedirectResponse:
    authorize_url = session_provider.sign_in_with_oauth(
        settings.oauth_provider, settings.oauth_redirect_url
    )
    return RedirectResponse(authorize_url, status_code=status.HTTP_302_FOUND)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Sign out",
)
def logout(
    session_provider: SupabaseSessionProvider = Depends(get_session_provider),
    settings: Settings = Depends(get_settings),
) -> Response:
    session_provider.sign_out()
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get(
    "/form",
    response_model=FormView,
    summary="Load the registration form",
    description="Checks the session, fetches the student profile, and returns "
    "the form view. A locked form means the student is already registered.",
)
def get_form(
    controller: RegistrationFormController = Depends(get_form_controller),
    navigator: RecordingNavigator = Depends(get_navigator),
) -> FormView:
    """
    Mount the registration form.

    - **redirect_to** is set when the caller must leave the form
      (no session, or profile fetch failed)
    """
    controller.mount()
    return FormView.from_render(controller.render(), navigator.target)


@router.post(
    "/form/guests",
    response_model=GuestInputResponse,
    summary="Validate a guest-count keystroke",
    description="Stateless preview of the guest validator: returns the bounded "
    "value, its error, and which guardian fields are required.",
)
def preview_guests(
    request_data: GuestInputRequest,
    settings: Settings = Depends(get_settings),
) -> GuestInputResponse:
    result = validate_guest_input(request_data.raw, settings.max_guests)
    draft = apply_guest_count(
        DraftRegistration(
            guardian_1_name=request_data.guardian_1_name,
            guardian_2_name=request_data.guardian_2_name,
        ),
        result.value,
    )
    requirements = derive_guardian_requirements(result.value)
    return GuestInputResponse(
        guest_count=result.value,
        error=result.error,
        show_guardian_1=requirements.show_guardian_1,
        show_guardian_2=requirements.show_guardian_2,
        guardian_1_name=draft.guardian_1_name,
        guardian_2_name=draft.guardian_2_name,
    )


@router.post(
    "/register",
    response_model=FormView,
    responses={
        422: {"description": "Validation error"},
    },
    summary="Submit a registration",
    description="Loads the profile, applies the guest count and guardian names, "
    "and submits. On success **redirect_to** points at the ticket view; an "
    "already-registered student gets a locked form with an informational message.",
)
def register(
    request_data: RegisterRequest,
    controller: RegistrationFormController = Depends(get_form_controller),
    navigator: RecordingNavigator = Depends(get_navigator),
) -> FormView:
    """
    Register for convocation.

    - **guest_count**: Number of guests (0-2)
    - **guardian_1_name**: Required for one or two guests
    - **guardian_2_name**: Required for two guests
    """
    if controller.mount() is FormStatus.EDITABLE:
        controller.change_guest_count(request_data.guest_count)
        controller.change_guardian_name(1, request_data.guardian_1_name)
        controller.change_guardian_name(2, request_data.guardian_2_name)
        controller.submit()
    return FormView.from_render(controller.render(), navigator.target)


@router.get(
    "/ticket",
    response_model=TicketView,
    summary="Registration confirmation",
    description="Returns the stored registration for a registered student, "
    "otherwise a redirect hint to the form or the login page.",
)
def ticket(
    controller: RegistrationFormController = Depends(get_form_controller),
    navigator: RecordingNavigator = Depends(get_navigator),
    settings: Settings = Depends(get_settings),
) -> TicketView:
    current = controller.mount()
    profile = controller.state.profile

    if current is FormStatus.LOCKED and profile is not None:
        return TicketView.from_profile(profile)
    if navigator.target is not None:
        return TicketView(registered=False, redirect_to=navigator.target)
    return TicketView(registered=False, redirect_to=settings.form_path)
