"""Bearer token verification.

Tokens are minted by the external identity provider; this service only
verifies them and reads the subject.
"""
import logging

from fastapi import Header, HTTPException

from accubooks.core.security import TokenExpiredError, TokenValidationError, decode_token

logger = logging.getLogger(__name__)


def get_current_user_id(authorization: str = Header(None)) -> str:
    if not authorization or not authorization.lower().startswith("bearer "):
        logger.info("auth.token.parse failed: missing_token")
        raise HTTPException(status_code=401, detail="Missing token")
    token = authorization.split(" ", 1)[1]
    try:
        payload = decode_token(token)
        return str(payload["sub"])
    except TokenExpiredError as exc:
        logger.info("auth.token.expired")
        raise HTTPException(status_code=401, detail="Token expired") from exc
    except TokenValidationError as exc:
        logger.info("auth.token.invalid")
        raise HTTPException(status_code=401, detail="Invalid token") from exc
