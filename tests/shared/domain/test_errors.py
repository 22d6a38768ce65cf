from breadboard.errors import (
    AuthRequired,
    BreadboardError,
    CartInvalid,
    InvalidIncrement,
    InvalidOtp,
    NotFound,
    OrderNotFound,
    RateLimited,
    UserExists,
    ValidationFailed,
)


class TestErrorTaxonomy:
    def test_to_dict_carries_code_and_details(self):
        error = InvalidIncrement("Quantity must be in increments of 6. Suggested: 12", suggested=12)

        assert error.to_dict() == {
            "message": "Quantity must be in increments of 6. Suggested: 12",
            "code": "INVALID_INCREMENT",
            "details": {"suggested": 12},
            "transient": False,
        }
        assert error.suggested == 12

    def test_default_messages(self):
        assert str(AuthRequired()) == "Authentication required"
        assert str(OrderNotFound()) == "Order not found"
        assert str(UserExists()) == "User already exists"
        assert str(InvalidOtp()) == "Invalid OTP"

    def test_families(self):
        assert isinstance(OrderNotFound(), NotFound)
        assert isinstance(CartInvalid(), ValidationFailed)
        assert isinstance(RateLimited(), BreadboardError)

    def test_status_codes(self):
        assert AuthRequired.status_code == 401
        assert RateLimited.status_code == 429
        assert InvalidOtp.status_code == 400
        assert UserExists.status_code == 409
        assert InvalidIncrement.status_code == 422

    def test_only_upstream_failures_are_transient(self):
        assert RateLimited().transient
        assert not CartInvalid().transient

    def test_none_details_are_dropped(self):
        assert CartInvalid("bad", errors=None).details == {}
