"""Randomized latency and failure injection around storefront operations.

The injector simulates a flaky backend: every guarded operation waits a
random delay and may fail with a rate limit or a transient server error.
It wraps the HTTP routes as a FastAPI dependency and never runs inside the
domain, so cart and order rules stay deterministic. Disable it with
``BREADBOARD_FAULTS_ENABLED=0`` or ``configure(faults_enabled=False)``.
"""

import asyncio
import random
from dataclasses import dataclass

import structlog

from breadboard.config import get_settings
from breadboard.errors import RateLimited, ServerError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FaultProfile:
    """Which failures an operation is exposed to."""

    rate_limit: bool = True
    server_error: bool = False
    server_error_cls: type[ServerError] = ServerError


RATE_LIMIT_ONLY = FaultProfile()
RATE_LIMIT_AND_SERVER_ERROR = FaultProfile(server_error=True)
NO_FAULTS = FaultProfile(rate_limit=False)


class FaultInjector:
    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def delay_seconds(self) -> float:
        settings = get_settings()
        return self.rng.uniform(settings.min_delay_seconds, settings.max_delay_seconds)

    def check(self, operation: str, profile: FaultProfile = RATE_LIMIT_ONLY) -> None:
        """Raise an injected failure for ``operation`` if the dice say so."""
        settings = get_settings()

        if not settings.faults_enabled:
            return

        if profile.rate_limit and self.rng.random() < settings.rate_limit_rate:
            logger.warning("Injected rate limit", operation=operation)
            raise RateLimited()

        if profile.server_error and self.rng.random() < settings.server_error_rate:
            logger.error("Injected server error", operation=operation)
            raise profile.server_error_cls()

    async def guard(self, operation: str, profile: FaultProfile = RATE_LIMIT_ONLY) -> None:
        """Simulated network round trip: wait, then maybe fail."""
        if get_settings().faults_enabled:
            await asyncio.sleep(self.delay_seconds())
        self.check(operation, profile)


_current_injector: FaultInjector | None = None


def get_injector() -> FaultInjector:
    """Return the current fault injector."""
    global _current_injector
    if _current_injector is None:
        _current_injector = FaultInjector()
    return _current_injector


def set_injector(injector: FaultInjector) -> None:
    """Override the active injector (useful for tests)."""
    global _current_injector
    _current_injector = injector


def reset_injector() -> None:
    global _current_injector
    _current_injector = None


def fault_point(operation: str, profile: FaultProfile = RATE_LIMIT_ONLY):
    """Build a FastAPI dependency that guards a route with fault injection."""

    async def _guard() -> None:
        await get_injector().guard(operation, profile)

    _guard.__name__ = f"fault_point_{operation.replace('.', '_')}"
    return _guard
