"""Runtime settings for breadboard.

Business constants (tax rate, shipping rules, order number prefix) and the
fault injection knobs are read from ``BREADBOARD_*`` environment variables.
Protean itself runs on its default configuration (in-memory database,
broker and event store).
"""

import os
from dataclasses import dataclass, replace

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value not in (None, "") else default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value in (None, ""):
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Immutable settings snapshot."""

    tax_rate: float = 0.09
    free_shipping_threshold: float = 75.0
    flat_shipping_fee: float = 15.0
    order_number_prefix: str = "BB-2024-"
    default_page_size: int = 12
    progression_probability: float = 0.3
    otp_code: str = "123456"
    token_ttl_seconds: int = 3600

    faults_enabled: bool = True
    rate_limit_rate: float = 0.05
    server_error_rate: float = 0.02
    payment_decline_rate: float = 0.05
    min_delay_seconds: float = 0.3
    max_delay_seconds: float = 0.7

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            tax_rate=_env_float("BREADBOARD_TAX_RATE", cls.tax_rate),
            free_shipping_threshold=_env_float("BREADBOARD_FREE_SHIPPING_THRESHOLD", cls.free_shipping_threshold),
            flat_shipping_fee=_env_float("BREADBOARD_FLAT_SHIPPING_FEE", cls.flat_shipping_fee),
            order_number_prefix=os.getenv("BREADBOARD_ORDER_NUMBER_PREFIX", cls.order_number_prefix),
            default_page_size=_env_int("BREADBOARD_PAGE_SIZE", cls.default_page_size),
            progression_probability=_env_float("BREADBOARD_PROGRESSION_PROBABILITY", cls.progression_probability),
            otp_code=os.getenv("BREADBOARD_OTP_CODE", cls.otp_code),
            token_ttl_seconds=_env_int("BREADBOARD_TOKEN_TTL_SECONDS", cls.token_ttl_seconds),
            faults_enabled=_env_bool("BREADBOARD_FAULTS_ENABLED", cls.faults_enabled),
            rate_limit_rate=_env_float("BREADBOARD_RATE_LIMIT_RATE", cls.rate_limit_rate),
            server_error_rate=_env_float("BREADBOARD_SERVER_ERROR_RATE", cls.server_error_rate),
            payment_decline_rate=_env_float("BREADBOARD_PAYMENT_DECLINE_RATE", cls.payment_decline_rate),
            min_delay_seconds=_env_float("BREADBOARD_MIN_DELAY_SECONDS", cls.min_delay_seconds),
            max_delay_seconds=_env_float("BREADBOARD_MAX_DELAY_SECONDS", cls.max_delay_seconds),
        )


_current_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment on first use."""
    global _current_settings
    if _current_settings is None:
        _current_settings = Settings.from_env()
    return _current_settings


def configure(**overrides) -> Settings:
    """Override individual settings (useful for tests)."""
    global _current_settings
    _current_settings = replace(get_settings(), **overrides)
    return _current_settings


def reset_settings() -> None:
    """Drop overrides; the next get_settings() reloads from the environment."""
    global _current_settings
    _current_settings = None
