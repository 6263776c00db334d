"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the form
controller and its infrastructure adapters into routes.
"""

import httpx
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapters.supabase.profile import SupabaseProfileService
from src.adapters.supabase.session import SupabaseSessionProvider
from src.adapters.web.navigator import RecordingNavigator
from src.config.settings import Settings, get_settings
from src.domain.registration import RegistrationFormController

# Bearer scheme for OpenAPI documentation; the session cookie is the fallback
http_bearer = HTTPBearer(auto_error=False)


def get_http_client(request: Request) -> httpx.Client:
    """
    Get the shared HTTP client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_access_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
    settings: Settings = Depends(get_settings),
) -> str | None:
    """
    Extract the caller's access token.

    Prefers the ``Authorization: Bearer`` header, then the session cookie.
    Returns None when neither is present; the controller treats that as
    "no session" and sends the user to login.
    """
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.session_cookie_name) or None


def get_session_provider(
    client: httpx.Client = Depends(get_http_client),
    access_token: str | None = Depends(get_access_token),
    settings: Settings = Depends(get_settings),
) -> SupabaseSessionProvider:
    """Create a session provider bound to this request's token."""
    return SupabaseSessionProvider(
        client,
        base_url=settings.supabase_url,
        anon_key=settings.supabase_anon_key,
        access_token=access_token,
    )


def get_profile_service(
    client: httpx.Client = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> SupabaseProfileService:
    return SupabaseProfileService(
        client, base_url=settings.supabase_url, anon_key=settings.supabase_anon_key
    )


def get_navigator() -> RecordingNavigator:
    """New navigator per request; routes read back its target."""
    return RecordingNavigator()


def get_form_controller(
    session_provider: SupabaseSessionProvider = Depends(get_session_provider),
    profile_service: SupabaseProfileService = Depends(get_profile_service),
    navigator: RecordingNavigator = Depends(get_navigator),
    settings: Settings = Depends(get_settings),
) -> RegistrationFormController:
    """
    Create a form controller with injected dependencies.

    FastAPI caches dependencies per request, so routes that also depend on
    get_navigator receive the same navigator the controller writes to.
    """
    return RegistrationFormController(
        session_provider=session_provider,
        profile_service=profile_service,
        navigator=navigator,
        login_path=settings.login_path,
        ticket_path=settings.ticket_path,
        max_guests=settings.max_guests,
    )
