from breadboard.identity.events import EmailVerified, UserRegistered
from breadboard.identity.user import User, UserRole, hash_password, normalize_email


def _register(**overrides):
    defaults = {
        "company_name": "Harbor Bistro",
        "contact_name": "Ava Brooks",
        "email": "Orders@HarborBistro.com ",
        "phone": "555-0142",
        "password": "harbor-pass",
    }
    defaults.update(overrides)
    return User.register(**defaults)


class TestPasswords:
    def test_hash_is_salted(self):
        assert hash_password("secret") != hash_password("secret")

    def test_same_salt_same_hash(self):
        assert hash_password("secret", "ab" * 16) == hash_password("secret", "ab" * 16)

    def test_check_password(self):
        user = _register()

        assert user.check_password("harbor-pass")
        assert not user.check_password("wrong")

    def test_user_without_password_never_matches(self):
        user = User(company_name="X", contact_name="Y", email="x@example.com")

        assert not user.check_password("")


class TestRegistration:
    def test_email_is_normalized(self):
        assert _register().email == "orders@harborbistro.com"
        assert normalize_email("  A@B.COM ") == "a@b.com"

    def test_new_user_is_unverified_buyer(self):
        user = _register()

        assert user.is_email_verified is False
        assert user.role == UserRole.USER.value
        assert user.registered_at is not None

    def test_raises_registered_event(self):
        user = _register()

        event = user._events[-1]
        assert isinstance(event, UserRegistered)
        assert event.email == "orders@harborbistro.com"


class TestEmailVerification:
    def test_verify_flips_flag_once(self):
        user = _register()

        assert user.verify_email() is True
        assert user.is_email_verified is True
        assert user.email_verified_at is not None
        assert isinstance(user._events[-1], EmailVerified)

        events_before = len(user._events)
        assert user.verify_email() is False
        assert len(user._events) == events_before
