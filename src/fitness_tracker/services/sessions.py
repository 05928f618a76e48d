"""Session resolution against Supabase Auth."""

import logging
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

import httpx

from fitness_tracker.adapters.supabase_auth_client import AuthClient
from fitness_tracker.domain.models import (
    Anonymous,
    Authenticated,
    Pending,
    SessionUser,
    ViewState,
)

logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Turn bearer tokens into view states."""

    auth_client: AuthClient

    async def resolve(self, access_token: str | None) -> ViewState:
        """Resolve a token to Pending, Anonymous or Authenticated."""
        if not access_token:
            return Anonymous()
        try:
            payload = await self.auth_client.get_user(access_token)
        except httpx.HTTPError:
            logger.warning("Auth provider unavailable", exc_info=True)
            return Pending()
        if payload is None:
            return Anonymous()
        try:
            return Authenticated(user=parse_session_user(payload))
        except (KeyError, ValueError):
            logger.warning("Auth provider returned an unusable user payload")
            return Anonymous()

    async def sign_out(self, access_token: str) -> None:
        """Sign out the session behind a token."""
        await self.auth_client.sign_out(access_token)


def parse_session_user(payload: dict[str, object]) -> SessionUser:
    """Build a session user from a Supabase Auth user payload."""
    metadata = payload.get("user_metadata") or {}
    name = (metadata.get("name") or metadata.get("full_name")) if metadata else None
    created_raw = payload.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return SessionUser(
        id=UUID(str(payload["id"])),
        name=name,
        email=payload.get("email"),
        created_at=created_at,
    )
