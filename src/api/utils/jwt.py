from typing import Optional
import logging

from jose import JWTError, jwt

from config import ApplicationConfig

logger = logging.getLogger(__name__)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode an access token issued by POST /auth/login

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict with user_id and email, or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=[ApplicationConfig.JWT_ALGORITHM]
        )
    except JWTError as e:
        logger.warning(f"JWT verification failed: {type(e).__name__} - {str(e)}")
        return None

    if not payload.get("user_id"):
        logger.warning("JWT verification failed: token carries no user_id")
        return None
    return payload
