"""FastAPI dependencies resolving the caller from a bearer token."""

from fastapi import Header

from breadboard.errors import AuthRequired
from breadboard.identity.access import resolve_access_token

_BEARER = "bearer"


def bearer_token(authorization: str = Header(default="")) -> str:
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != _BEARER or not token.strip():
        raise AuthRequired()
    return token.strip()


def current_user_id(authorization: str = Header(default="")) -> str:
    """The id of the user behind the request's access token."""
    return resolve_access_token(bearer_token(authorization))
