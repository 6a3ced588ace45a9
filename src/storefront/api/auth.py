"""Request guards for the Product API.

Tokens are issued elsewhere; this module only verifies them. Every route needs
the shared API key. Review routes also need a bearer token, and catalogue
writes need a token whose account type is ``ADMIN``.
"""

import hmac
from dataclasses import dataclass

import jwt
from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer

from storefront import config
from storefront.shared.validation import check_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

api_key_header = APIKeyHeader(name="apikey", auto_error=False)
bearer_scheme = HTTPBearer(auto_error=False)

INVALID_TOKEN = "Expired or invalid token"


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    email: str
    account_type: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.account_type == config.ADMIN_ACCOUNT_TYPE


def token_payload(user_id, email, account_type=None) -> dict:
    """Claims carried by an access token."""
    return {"id": str(user_id) if user_id else None, "email": email or None, "accountType": account_type or None}


def decode_token(token: str) -> AuthenticatedUser:
    """Verify ``token`` and return the user it identifies.

    Raises ``HTTPException(401)`` when the signature, expiry or claims are wrong.
    """
    secret = config.jwt_secret()
    if not secret:
        logger.error("jwt_secret_not_configured")
        raise HTTPException(status_code=401, detail=INVALID_TOKEN)

    try:
        payload = jwt.decode(token, secret, algorithms=[config.jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        logger.warning("token_rejected", reason=str(exc))
        raise HTTPException(status_code=401, detail=INVALID_TOKEN) from exc

    user_id, email = payload.get("id"), payload.get("email")
    if not (user_id and email and check_id(user_id)):
        logger.warning("token_payload_rejected", has_id=bool(user_id), has_email=bool(email))
        raise HTTPException(status_code=401, detail=INVALID_TOKEN)

    return AuthenticatedUser(id=str(user_id), email=email, account_type=payload.get("accountType"))


def require_api_key(apikey: str | None = Security(api_key_header)) -> None:
    expected = config.api_key()
    if not (apikey and expected and hmac.compare_digest(apikey, expected)):
        logger.warning("api_key_rejected", provided=apikey is not None)
        raise HTTPException(status_code=401, detail="Missing or invalid API key")


def current_user(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> AuthenticatedUser:
    if credentials is None:
        raise HTTPException(status_code=401, detail="Authentication token required")
    return decode_token(credentials.credentials)


def require_admin(user: AuthenticatedUser = Depends(current_user)) -> AuthenticatedUser:
    if not user.is_admin:
        logger.warning("admin_required", user=user.id)
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
