"""User registration: command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from breadboard.config import get_settings
from breadboard.domain import breadboard
from breadboard.errors import UserExists
from breadboard.identity.session import Authenticated, Session
from breadboard.identity.user import User
from breadboard.utils.logging import get_logger

logger = get_logger(__name__)


@breadboard.command(part_of="User")
class RegisterUser:
    """Create an unverified company account and sign it in."""

    company_name = String(required=True, max_length=255)
    contact_name = String(required=True, max_length=255)
    email = String(required=True, max_length=254)
    phone = String(max_length=30)
    password = String(required=True, max_length=255)


@breadboard.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        users = current_domain.repository_for(User)
        if users.find_by_email(command.email) is not None:
            logger.warning("registration_rejected", reason="email_taken")
            raise UserExists()

        user = User.register(
            company_name=command.company_name,
            contact_name=command.contact_name,
            email=command.email,
            phone=command.phone,
            password=command.password,
        )
        users.add(user)

        session = Session.open(user.id, get_settings().token_ttl_seconds)
        current_domain.repository_for(Session).add(session)

        logger.info("user_registered", user_id=str(user.id), company_name=user.company_name)
        return Authenticated(user=user, session=session)
