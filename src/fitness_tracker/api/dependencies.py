"""Shared request dependencies for API routers."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Depends, Header, Request

from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.models import (
    Authenticated,
    Pending,
    SessionUser,
    ViewState,
)
from fitness_tracker.errors import (
    MissingSessionError,
    NotFoundError,
    SessionPendingError,
    StoreOperationError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the app."""
    return request.app.state.container


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an `Authorization: Bearer ...` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_view_state(
    authorization: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> ViewState:
    """Resolve the request's session once."""
    return await container.session_service.resolve(bearer_token(authorization))


async def require_user(
    view_state: ViewState = Depends(get_view_state),
) -> SessionUser:
    """Return the signed-in user or fail with a session error."""
    if isinstance(view_state, Authenticated):
        return view_state.user
    if isinstance(view_state, Pending):
        raise SessionPendingError()
    raise MissingSessionError()


@contextmanager
def store_action(failure_message: str, user: SessionUser) -> Iterator[None]:
    """Log failures of a user action and surface one message for them."""
    try:
        yield
    except ValidationError as exc:
        logger.info(
            "Rejected request: %s", exc.message, extra={"user_id": str(user.id)}
        )
        raise
    except (MissingSessionError, SessionPendingError, NotFoundError):
        raise
    except Exception as exc:
        logger.exception(failure_message, extra={"user_id": str(user.id)})
        raise StoreOperationError(failure_message) from exc
