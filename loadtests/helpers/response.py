"""Response error extraction for load test observability.

Parses Breadboard API error responses into human-readable messages.
Handles two response shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Storefront errors: {"message": "...", "code": "...", "details": {...}, "transient": bool}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from locust.clients import ResponseContextManager


def extract_error_detail(response: ResponseContextManager) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    Gracefully handles unparseable bodies and missing fields.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON; return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    # Pydantic validation errors: {"detail": [{"loc": [...], "msg": "..."}]}
    if "detail" in body and isinstance(body["detail"], list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "code" in body:
        return f"{body['code']}: {body.get('message', '')}"

    # Unknown shape; stringify and truncate
    return str(body)[:300]


def is_transient(response: ResponseContextManager) -> bool:
    """True for injected rate limits and server errors, which callers may retry."""
    try:
        return bool(response.json().get("transient"))
    except (ValueError, AttributeError):
        return False
