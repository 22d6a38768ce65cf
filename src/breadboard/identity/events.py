"""Domain events for the User and Session aggregates."""

from protean.fields import DateTime, Identifier, String

from breadboard.domain import breadboard


@breadboard.event(part_of="User")
class UserRegistered:
    """A new company account registered; its email is not verified yet."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    company_name = String(required=True)
    registered_at = DateTime(required=True)


@breadboard.event(part_of="User")
class EmailVerified:
    """The account holder confirmed their email with a one-time passcode."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True)
    verified_at = DateTime(required=True)


@breadboard.event(part_of="Session")
class SessionOpened:
    __version__ = 1

    session_id = Identifier(required=True)
    user_id = Identifier(required=True)
    expires_at = DateTime(required=True)


@breadboard.event(part_of="Session")
class SessionRefreshed:
    __version__ = 1

    session_id = Identifier(required=True)
    user_id = Identifier(required=True)
    expires_at = DateTime(required=True)


@breadboard.event(part_of="Session")
class SessionRevoked:
    __version__ = 1

    session_id = Identifier(required=True)
    user_id = Identifier(required=True)
