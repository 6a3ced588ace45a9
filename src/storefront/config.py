"""Application settings read from the environment.

Persistence, broker and event store settings live in ``domain.toml`` and are
loaded by Protean. The values here belong to the HTTP edge.
"""

import os

ADMIN_ACCOUNT_TYPE = "ADMIN"


def api_key() -> str | None:
    return os.getenv("API_KEY")


def jwt_secret() -> str | None:
    return os.getenv("JWT_SECRET")


def jwt_algorithm() -> str:
    return os.getenv("JWT_ALGORITHM", "HS256")
