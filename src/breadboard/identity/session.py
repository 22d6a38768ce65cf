"""Session aggregate: an issued access/refresh token pair for one user."""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from protean.fields import Boolean, DateTime, Identifier, String

from breadboard.domain import breadboard
from breadboard.identity.events import SessionOpened, SessionRefreshed, SessionRevoked


def _aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo else moment.replace(tzinfo=UTC)


@breadboard.aggregate
class Session:
    user_id = Identifier(required=True)
    access_token = String(required=True, max_length=128, unique=True)
    refresh_token = String(required=True, max_length=128, unique=True)
    expires_at = DateTime(required=True)
    revoked = Boolean(default=False)

    @classmethod
    def open(cls, user_id, ttl_seconds):
        expires_at = datetime.now(UTC) + timedelta(seconds=ttl_seconds)
        session = cls(
            user_id=str(user_id),
            access_token=f"bb_access_{secrets.token_urlsafe(24)}",
            refresh_token=f"bb_refresh_{secrets.token_urlsafe(24)}",
            expires_at=expires_at,
        )
        session.raise_(SessionOpened(session_id=str(session.id), user_id=str(user_id), expires_at=expires_at))
        return session

    def is_active(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(UTC)
        return not self.revoked and _aware(self.expires_at) > now

    def rotate(self, ttl_seconds):
        """Issue a fresh token pair and extend the expiry."""
        self.access_token = f"bb_access_{secrets.token_urlsafe(24)}"
        self.refresh_token = f"bb_refresh_{secrets.token_urlsafe(24)}"
        self.expires_at = datetime.now(UTC) + timedelta(seconds=ttl_seconds)

        self.raise_(
            SessionRefreshed(session_id=str(self.id), user_id=str(self.user_id), expires_at=self.expires_at)
        )

    def revoke(self):
        if self.revoked:
            return
        self.revoked = True
        self.raise_(SessionRevoked(session_id=str(self.id), user_id=str(self.user_id)))


@breadboard.repository(part_of=Session)
class SessionRepository:
    def find_by_access_token(self, access_token: str) -> Session | None:
        results = self._dao.query.filter(access_token=access_token).all().items
        return results[0] if results else None

    def find_by_refresh_token(self, refresh_token: str) -> Session | None:
        results = self._dao.query.filter(refresh_token=refresh_token).all().items
        return results[0] if results else None


@dataclass(frozen=True)
class Authenticated:
    """What register, login and OTP verification hand back to the caller."""

    user: object
    session: Session
