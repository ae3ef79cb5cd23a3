from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Tokens are issued by the external auth service (HS256) and carry the
    caller's hub_id and roles claims.

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"])
        return payload
    except JWTError:
        return None
