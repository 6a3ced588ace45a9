"""Response error extraction for load test observability.

Parses Storefront API error responses into human-readable messages.
Handles two response shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Guards and domain errors (400/401/403/404): {"detail": "msg"} or {"error": {"field": [...]}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from requests.exceptions import JSONDecodeError

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a compact error message suitable for Locust failure messages and log lines."""
    try:
        body = response.json()
    except JSONDecodeError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, list):
        parts = []
        for err in detail:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)
    if detail is not None:
        return str(detail)

    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return " | ".join(f"{k}: {v}" for k, v in error.items())
    if error is not None:
        return str(error)

    return str(body)[:300]
