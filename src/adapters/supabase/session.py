"""
Supabase session adapter - Implements SessionProvider protocol.

This module resolves the caller's access token against Supabase Auth
over HTTP. One instance is bound to one request's token.
"""

import logging
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from src.adapters.supabase.models import UserPayload
from src.domain.models import Session

logger = logging.getLogger(__name__)


class SupabaseSessionProvider:
    """
    Implements SessionProvider protocol via Supabase Auth REST endpoints.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The access token is only read; sign-out asks the provider to revoke it.
    """

    def __init__(
        self,
        client: httpx.Client,
        base_url: str,
        anon_key: str,
        access_token: str | None,
    ) -> None:
        """
        Initialize provider for a single caller.

        Args:
            client: Shared httpx client (timeouts configured by the app)
            base_url: Supabase project URL
            anon_key: Project anon key, sent as the ``apikey`` header
            access_token: Caller's bearer token, or None when absent
        """
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._anon_key = anon_key
        self._access_token = access_token

    def get_current_session(self) -> Session | None:
        """
        Validate the bound token with ``GET /auth/v1/user``.

        Any failure to confirm the token means there is no session.
        """
        if not self._access_token:
            return None

        try:
            response = self._client.get(
                f"{self._base_url}/auth/v1/user", headers=self._headers()
            )
        except httpx.HTTPError as exc:
            logger.warning("Session lookup failed: %s", exc.__class__.__name__)
            return None

        if response.status_code != httpx.codes.OK:
            logger.info("Session rejected by provider (status %s)", response.status_code)
            return None

        try:
            user = UserPayload.model_validate(response.json())
        except (ValueError, ValidationError):
            logger.warning("Session lookup returned an unreadable body")
            return None
        return user.to_session(self._access_token)

    def sign_out(self) -> None:
        """Revoke the bound token with ``POST /auth/v1/logout``."""
        if not self._access_token:
            return

        try:
            response = self._client.post(
                f"{self._base_url}/auth/v1/logout", headers=self._headers()
            )
        except httpx.HTTPError as exc:
            logger.warning("Sign-out request failed: %s", exc.__class__.__name__)
            return

        if response.is_error:
            logger.warning("Sign-out rejected by provider (status %s)", response.status_code)

    def sign_in_with_oauth(self, provider: str, redirect_to: str) -> str:
        """Build the ``/auth/v1/authorize`` URL that starts the OAuth flow."""
        query = urlencode({"provider": provider, "redirect_to": redirect_to})
        return f"{self._base_url}/auth/v1/authorize?{query}"

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self._anon_key,
            "Authorization": f"Bearer {self._access_token}",
        }
