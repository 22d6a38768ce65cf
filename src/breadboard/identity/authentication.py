"""Sign-in, token refresh and sign-out: commands and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from breadboard.config import get_settings
from breadboard.domain import breadboard
from breadboard.errors import InvalidCredentials, InvalidToken
from breadboard.identity.session import Authenticated, Session
from breadboard.identity.user import User
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)


@breadboard.command(part_of="Session")
class Login:
    email = String(required=True, max_length=254)
    password = String(required=True, max_length=255)


@breadboard.command(part_of="Session")
class RefreshSession:
    refresh_token = String(required=True, max_length=128)


@breadboard.command(part_of="Session")
class Logout:
    access_token = String(required=True, max_length=128)


@breadboard.command_handler(part_of=Session)
class SessionHandler:
    @handle(Login)
    def login(self, command):
        user = current_domain.repository_for(User).find_by_email(command.email)
        if user is None or not user.check_password(command.password):
            logger.warning("login_rejected")
            raise InvalidCredentials()

        session = Session.open(user.id, get_settings().token_ttl_seconds)
        current_domain.repository_for(Session).add(session)

        logger.info("user_logged_in", user_id=str(user.id))
        return Authenticated(user=user, session=session)

    @handle(RefreshSession)
    def refresh_session(self, command):
        sessions = current_domain.repository_for(Session)
        session = sessions.find_by_refresh_token(command.refresh_token)
        if session is None or session.revoked:
            raise InvalidToken()

        session.rotate(get_settings().token_ttl_seconds)
        sessions.add(session)

        user = current_domain.repository_for(User).get(session.user_id)
        return Authenticated(user=user, session=session)

    @handle(Logout)
    def logout(self, command):
        sessions = current_domain.repository_for(Session)
        session = sessions.find_by_access_token(command.access_token)
        if session is None:
            return

        session.revoke()
        sessions.add(session)
        logger.info("user_logged_out", user_id=str(session.user_id))
