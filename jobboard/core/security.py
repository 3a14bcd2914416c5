"""
Security utilities for the admin page session.

The single admin credential comes from settings and is checked against a
bcrypt hash. A successful login is carried in a signed JWT cookie. The
HTML login/logout forms use a double-submit CSRF token; /api routes are
exempt from both.
"""

import hmac
import secrets
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from jobboard.core.config import settings

# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    return pwd_context.verify(password_bytes, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt (truncated to bcrypt's 72-byte limit)."""
    password_bytes = password.encode('utf-8')[:72]
    return pwd_context.hash(password_bytes)


@lru_cache(maxsize=1)
def admin_password_hash() -> str:
    """Hash of the configured admin password, computed once per process."""
    return get_password_hash(settings.ADMIN_PASSWORD)


def authenticate_admin(username: str, password: str) -> bool:
    if not hmac.compare_digest(username.encode('utf-8'), settings.ADMIN_USERNAME.encode('utf-8')):
        return False
    return verify_password(password, admin_password_hash())


def create_session_token(username: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create the signed session token stored in the session cookie.

    Args:
        username: Authenticated admin username (becomes the "sub" claim)
        expires_delta: Optional lifetime (default: SESSION_EXPIRE_MINUTES)

    Returns:
        Encoded JWT as a string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)

    to_encode = {
        "sub": username,
        "role": "ADMIN",
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def read_session_token(token: Optional[str]) -> Optional[str]:
    """
    Decode a session token.

    Returns:
        The admin username, or None if the token is missing, expired or forged
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    username = payload.get("sub")
    if username != settings.ADMIN_USERNAME:
        return None
    return username


def generate_csrf_token() -> str:
    return secrets.token_urlsafe(32)


def csrf_tokens_match(cookie_token: Optional[str], form_token: Optional[str]) -> bool:
    if not cookie_token or not form_token:
        return False
    return hmac.compare_digest(cookie_token, form_token)
