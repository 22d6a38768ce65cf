"""User aggregate: a registered B2B buyer account."""

import hashlib
import hmac
import secrets
from datetime import UTC, datetime
from enum import Enum

from protean.fields import Boolean, DateTime, String

from breadboard.domain import FETCH_LIMIT, breadboard
from breadboard.identity.events import EmailVerified, UserRegistered

_PBKDF2_ITERATIONS = 120_000


class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"


def hash_password(password: str, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), bytes.fromhex(salt), _PBKDF2_ITERATIONS)
    return f"{salt}${digest.hex()}"


def normalize_email(email: str) -> str:
    return email.strip().lower()


@breadboard.aggregate
class User:
    """A buyer account, identified by a unique email.

    ``is_email_verified`` starts false and flips exactly once, when the
    account holder passes the OTP check. Everything else is fixed after
    registration.
    """

    company_name = String(required=True, max_length=255)
    contact_name = String(required=True, max_length=255)
    email = String(required=True, max_length=254, unique=True)
    phone = String(max_length=30)
    password_hash = String(max_length=255)
    is_email_verified = Boolean(default=False)
    role = String(choices=UserRole, default=UserRole.USER.value)
    registered_at = DateTime()
    email_verified_at = DateTime()

    @classmethod
    def register(cls, company_name, contact_name, email, phone, password, role=UserRole.USER.value):
        now = datetime.now(UTC)
        user = cls(
            company_name=company_name,
            contact_name=contact_name,
            email=normalize_email(email),
            phone=phone,
            password_hash=hash_password(password),
            role=role,
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                company_name=company_name,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password: str) -> bool:
        if not self.password_hash:
            return False
        salt, _ = self.password_hash.split("$", 1)
        return hmac.compare_digest(hash_password(password, salt), self.password_hash)

    def verify_email(self) -> bool:
        """Mark the email verified. Returns False when it already was."""
        if self.is_email_verified:
            return False

        now = datetime.now(UTC)
        self.is_email_verified = True
        self.email_verified_at = now

        self.raise_(EmailVerified(user_id=str(self.id), email=self.email, verified_at=now))
        return True


@breadboard.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        results = self._dao.query.filter(email=normalize_email(email)).all().items
        return results[0] if results else None

    def all_users(self) -> list[User]:
        return self._dao.query.limit(FETCH_LIMIT).all().items
