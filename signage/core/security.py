import hashlib
import secrets

from jose import JWTError, jwt
from signage.config import settings
from signage.core.exceptions import NoTenantIdentityException


def decode_jwt(token: str) -> dict:
    """
    Decode and verify a JWT using the shared SECRET_KEY.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Decoded token payload with 'sub' (tenant subject), 'exp', etc.

    Raises:
        NoTenantIdentityException: If token invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise NoTenantIdentityException(f"Invalid token: {str(e)}")

    # jose only checks exp when it is present
    if payload.get("exp") is None:
        raise NoTenantIdentityException("Token missing expiration")

    if not payload.get("sub"):
        raise NoTenantIdentityException("Token missing tenant identifier")

    return payload


def generate_device_token() -> str:
    """Issue a new opaque device token for a playback screen"""
    return secrets.token_urlsafe(32)


def hash_device_token(token: str) -> str:
    """Device tokens are stored only as their sha256 hex digest"""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
