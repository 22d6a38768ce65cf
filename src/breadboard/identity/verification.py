"""Email verification with a one-time passcode.

Delivery is mocked: the passcode is written to the log instead of being
emailed. Every account shares the configured code.
"""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from breadboard.config import get_settings
from breadboard.domain import breadboard
from breadboard.errors import InvalidOtp, UserNotFound
from breadboard.identity.session import Authenticated, Session
from breadboard.identity.user import User, normalize_email
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)


@breadboard.command(part_of="User")
class SendOtp:
    email = String(required=True, max_length=254)


@breadboard.command(part_of="User")
class VerifyOtp:
    email = String(required=True, max_length=254)
    otp = String(required=True, max_length=12)


@breadboard.command_handler(part_of=User)
class EmailVerificationHandler:
    @handle(SendOtp)
    def send_otp(self, command):
        logger.info("otp_sent", email=normalize_email(command.email), otp=get_settings().otp_code)

    @handle(VerifyOtp)
    def verify_otp(self, command):
        if command.otp != get_settings().otp_code:
            logger.warning("otp_rejected", email=normalize_email(command.email))
            raise InvalidOtp()

        users = current_domain.repository_for(User)
        user = users.find_by_email(command.email)
        if user is None:
            raise UserNotFound()

        if user.verify_email():
            users.add(user)
            logger.info("email_verified", user_id=str(user.id))

        session = Session.open(user.id, get_settings().token_ttl_seconds)
        current_domain.repository_for(Session).add(session)
        return Authenticated(user=user, session=session)
