"""Identity token manager: password login, proactive refresh, refresh-token persistence."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from json import JSONDecodeError
from pathlib import Path
from typing import Any

import requests

from config import Settings
from errors import AuthError
from models import TokenState

LOGGER = logging.getLogger(__name__)

TOKEN_PATH = "/auth/v1/token"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenManager:
    """Owns the single TokenState of a run.

    The state is read before every protected fetch via ``ensure_fresh`` and
    written only after a successful login or refresh.
    """

    def __init__(
        self,
        settings: Settings,
        token_path: Path | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._settings = settings
        self._token_path = token_path or settings.refresh_token_path
        self._clock = clock
        self.state: TokenState | None = None

    def login(self, email: str, password: str) -> TokenState:
        """Exchange email/password for a fresh token pair."""
        state = self._request_token(
            grant_type="password",
            payload={"email": email, "password": password},
            rejected_reason=AuthError.INVALID_CREDENTIALS,
            action="login",
        )
        LOGGER.info("Login successful (token expires at %s)", state.expires_at.isoformat())
        self.state = state
        return state

    def refresh(self, refresh_token: str) -> TokenState:
        """Exchange a refresh token for a new token pair."""
        state = self._request_token(
            grant_type="refresh_token",
            payload={"refresh_token": refresh_token},
            rejected_reason=AuthError.REFRESH_REJECTED,
            action="token refresh",
        )
        LOGGER.info("Token refreshed (expires at %s)", state.expires_at.isoformat())
        self.state = state
        return state

    def persist(self, refresh_token: str) -> None:
        """Overwrite the stored refresh token. Raises OSError on failure."""
        self._token_path.write_text(refresh_token, encoding="utf-8")
        LOGGER.debug("Saved refresh token to %s", self._token_path)

    def load_persisted(self) -> str | None:
        """Return the stored refresh token, or None when absent, empty or unreadable."""
        try:
            raw = self._token_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.warning("Ignoring unreadable refresh token store %s: %s", self._token_path, exc)
            return None
        token = raw.strip()
        return token or None

    def bootstrap(self) -> TokenState:
        """Seed the state from storage, falling back to an interactive login."""
        saved = self.load_persisted()
        if saved:
            LOGGER.info("Found saved refresh token; skipping password login")
            self.state = TokenState.from_refresh_token(saved)
            return self.state

        LOGGER.info("Authenticating with email/password...")
        state = self.login(self._settings.email, self._settings.password)
        self._persist_quietly(state.refresh_token)
        return state

    def ensure_fresh(self) -> TokenState:
        """Return a usable state, refreshing first if it has expired.

        Raises:
            AuthError: no state has been bootstrapped or the refresh failed.
        """
        if self.state is None:
            raise AuthError(
                "No token state available; call bootstrap() first",
                AuthError.REFRESH_REJECTED,
            )
        if not self.state.is_expired(self._clock()):
            return self.state

        LOGGER.debug("Access token expired or missing; refreshing")
        state = self.refresh(self.state.refresh_token)
        self._persist_quietly(state.refresh_token)
        return state

    def _persist_quietly(self, refresh_token: str) -> None:
        # Losing a rotation only costs a password login on the next run.
        try:
            self.persist(refresh_token)
        except OSError as exc:
            LOGGER.warning("Failed to save refresh token to %s: %s", self._token_path, exc)

    def _request_token(
        self,
        *,
        grant_type: str,
        payload: dict[str, str],
        rejected_reason: str,
        action: str,
    ) -> TokenState:
        url = f"{self._settings.project_url}{TOKEN_PATH}"
        headers = {
            "apikey": self._settings.anon_key,
            "Content-Type": "application/json",
        }
        try:
            response = requests.post(
                url,
                params={"grant_type": grant_type},
                headers=headers,
                json=payload,
                timeout=self._settings.request_timeout_seconds,
            )
        except requests.RequestException as exc:
            raise AuthError(f"{action} failed: {exc}", AuthError.NETWORK_FAILURE) from exc

        if response.status_code != 200:
            raise AuthError(
                f"{action} failed: status {response.status_code}, body: {response.text}",
                rejected_reason,
            )

        try:
            body = response.json()
        except (JSONDecodeError, ValueError) as exc:
            raise AuthError(
                f"{action} returned a non-JSON body", AuthError.MALFORMED_RESPONSE
            ) from exc

        return self._parse_token_response(body, action)

    def _parse_token_response(self, body: Any, action: str) -> TokenState:
        if not isinstance(body, dict):
            raise AuthError(
                f"{action} returned an unexpected payload", AuthError.MALFORMED_RESPONSE
            )

        access_token = body.get("access_token")
        refresh_token = body.get("refresh_token")
        expires_in = body.get("expires_in")
        if not isinstance(access_token, str) or not isinstance(refresh_token, str):
            raise AuthError(
                f"{action} response is missing tokens", AuthError.MALFORMED_RESPONSE
            )
        try:
            ttl = int(expires_in)
        except (TypeError, ValueError) as exc:
            raise AuthError(
                f"{action} response has invalid expires_in: {expires_in!r}",
                AuthError.MALFORMED_RESPONSE,
            ) from exc

        return TokenState(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=self._clock() + timedelta(seconds=ttl),
        )
