"""
Supabase profile adapter - Implements ProfileService protocol.

This module calls the two edge functions that back the registration
form: ``get-student-info-by-auth`` and ``register-student-by-auth``.

Error translation:
- Fetch: transport errors, non-2xx responses, and unreadable bodies all
  raise ProfileFetchFailed, carrying the server's ``error`` text when
  there is one.
- Submit: HTTP responses become a SubmitResponse (409 is CONFLICT);
  transport errors and timeouts raise ServiceUnavailable.
"""

import logging

import httpx
from pydantic import ValidationError

from src.adapters.supabase.models import ErrorPayload, ProfilePayload
from src.domain.exceptions import ProfileFetchFailed, ServiceUnavailable
from src.domain.models import DraftRegistration, Profile, Session
from src.domain.ports import SubmitResponse, SubmitResult

logger = logging.getLogger(__name__)

FETCH_FUNCTION = "get-student-info-by-auth"
SUBMIT_FUNCTION = "register-student-by-auth"

TIMEOUT_MESSAGE = "The request timed out. Please try again."
NETWORK_MESSAGE = (
    "Unable to reach the registration service. "
    "Please check your connection and try again."
)


class SupabaseProfileService:
    """
    Implements ProfileService protocol via Supabase edge functions.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, client: httpx.Client, base_url: str, anon_key: str) -> None:
        """
        Initialize service.

        Args:
            client: Shared httpx client (timeouts configured by the app)
            base_url: Supabase project URL
            anon_key: Project anon key, sent as the ``apikey`` header
        """
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._anon_key = anon_key

    def fetch_profile(self, session: Session) -> Profile:
        """
        Fetch the caller's profile and registration status.

        Raises:
            ProfileFetchFailed: On network, parse, or non-success response
        """
        try:
            response = self._client.post(
                self._function_url(FETCH_FUNCTION), headers=self._headers(session)
            )
        except httpx.TimeoutException:
            logger.warning("Profile fetch timed out")
            raise ProfileFetchFailed(TIMEOUT_MESSAGE) from None
        except httpx.HTTPError as exc:
            logger.warning("Profile fetch failed: %s", exc.__class__.__name__)
            raise ProfileFetchFailed(NETWORK_MESSAGE) from None

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            message = _error_text(body) or f"Profile request failed ({response.status_code})."
            logger.warning("Profile fetch rejected (status %s)", response.status_code)
            raise ProfileFetchFailed(message)

        if not isinstance(body, dict):
            raise ProfileFetchFailed("Profile response was not valid JSON.")

        try:
            return ProfilePayload.model_validate(body).to_profile()
        except ValidationError:
            logger.warning("Profile response failed validation")
            raise ProfileFetchFailed("Profile response was malformed.") from None

    def submit_registration(
        self, session: Session, draft: DraftRegistration
    ) -> SubmitResponse:
        """
        Submit the registration draft.

        Return values by scenario:
        - SUCCESS: any 2xx response
        - CONFLICT: 409, server message kept for display
        - FAILED: JSON ``error`` or plain-text body

        Raises:
            ServiceUnavailable: Network failure or timeout
        """
        try:
            response = self._client.post(
                self._function_url(SUBMIT_FUNCTION),
                headers=self._headers(session),
                json=draft.to_payload(),
            )
        except httpx.TimeoutException:
            logger.warning("Registration submit timed out")
            raise ServiceUnavailable(TIMEOUT_MESSAGE) from None
        except httpx.HTTPError as exc:
            logger.warning("Registration submit failed: %s", exc.__class__.__name__)
            raise ServiceUnavailable(NETWORK_MESSAGE) from None

        if response.is_success:
            return SubmitResponse(SubmitResult.SUCCESS)

        message = _response_message(response)
        if response.status_code == httpx.codes.CONFLICT:
            return SubmitResponse(SubmitResult.CONFLICT, message)

        logger.warning("Registration submit rejected (status %s)", response.status_code)
        return SubmitResponse(SubmitResult.FAILED, message)

    def _function_url(self, name: str) -> str:
        return f"{self._base_url}/functions/v1/{name}"

    def _headers(self, session: Session) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "apikey": self._anon_key,
            "Authorization": f"Bearer {session.access_token}",
        }


def _error_text(body: object) -> str:
    if not isinstance(body, dict):
        return ""
    try:
        return ErrorPayload.model_validate(body).error or ""
    except ValidationError:
        return ""


def _response_message(response: httpx.Response) -> str:
    """Server error text: JSON ``error`` first, then the plain-text body."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()
    return _error_text(body)
