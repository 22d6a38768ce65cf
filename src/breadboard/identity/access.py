"""Resolving callers to users.

Every cart and order operation receives an explicit user id; these helpers
turn a bearer access token into that id and confirm the user exists.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from breadboard.errors import AuthRequired
from breadboard.identity.session import Session
from breadboard.identity.user import User


def resolve_access_token(access_token: str | None) -> str:
    """User id behind an active access token; AuthRequired otherwise."""
    if not access_token:
        raise AuthRequired()

    session = current_domain.repository_for(Session).find_by_access_token(access_token)
    if session is None or not session.is_active():
        raise AuthRequired()

    return str(session.user_id)


def require_user(user_id: str | None) -> User:
    if not user_id:
        raise AuthRequired()

    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise AuthRequired() from None
