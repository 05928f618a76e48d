"""Session and view-state models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class SessionUser:
    """Authenticated user as reported by Supabase Auth."""

    id: UUID
    name: str | None = None
    email: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class Pending:
    """The session could not be resolved yet."""


@dataclass(frozen=True)
class Anonymous:
    """No signed-in user."""


@dataclass(frozen=True)
class Authenticated:
    """A signed-in user."""

    user: SessionUser


ViewState = Pending | Anonymous | Authenticated
