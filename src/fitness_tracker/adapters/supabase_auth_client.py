"""Supabase Auth (GoTrue) API client adapter."""

from dataclasses import dataclass
from typing import Protocol

import httpx

_REJECTED_STATUSES = {401, 403}


class AuthClient(Protocol):
    """Interface for Supabase Auth interactions."""

    async def get_user(self, access_token: str) -> dict[str, object] | None:
        """Return the user for an access token, or None if it is rejected."""

    async def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""


@dataclass
class HttpxSupabaseAuthClient(AuthClient):
    """Supabase Auth client implemented with httpx."""

    base_url: str
    api_key: str
    http_client: httpx.AsyncClient
    timeout: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, api_key: str, timeout: float = 10.0
    ) -> "HttpxSupabaseAuthClient":
        """Create an auth client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            api_key=api_key,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def get_user(self, access_token: str) -> dict[str, object] | None:
        """Fetch the user behind an access token."""
        response = await self.http_client.get(
            f"{self.base_url}/auth/v1/user",
            headers=self._headers(access_token),
            timeout=self.timeout,
        )
        if response.status_code in _REJECTED_STATUSES:
            return None
        response.raise_for_status()
        return response.json()

    async def sign_out(self, access_token: str) -> None:
        """Sign the session out on the auth server."""
        response = await self.http_client.post(
            f"{self.base_url}/auth/v1/logout",
            headers=self._headers(access_token),
            timeout=self.timeout,
        )
        if response.status_code in _REJECTED_STATUSES:
            return
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    def _headers(self, access_token: str) -> dict[str, str]:
        return {"apikey": self.api_key, "Authorization": f"Bearer {access_token}"}
