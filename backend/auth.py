"""Password hashing, JWT bearer tokens and registration field checks."""
from passlib.context import CryptContext
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict
import os

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

JWT_SECRET = os.getenv("JWT_SECRET", "briefly-dev-secret-change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRATION_HOURS = int(os.getenv("JWT_EXPIRATION_HOURS", "24"))

BEARER_PREFIX = "Bearer "

MIN_PASSWORD_LENGTH = 6
MIN_NAME_LENGTH = 2


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """False for a wrong password or an unreadable stored hash."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_access_token(claims: Dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign claims into a JWT; expiry defaults to JWT_EXPIRATION_HOURS."""
    lifetime = expires_delta if expires_delta is not None else timedelta(hours=JWT_EXPIRATION_HOURS)
    issued_at = datetime.now(timezone.utc)
    payload = {**claims, "iat": issued_at, "exp": issued_at + lifetime}
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[Dict]:
    """Claims of a valid, unexpired token, else None."""
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Token part of an `Authorization: Bearer <token>` header."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


def validate_registration(name: str, email: str, password: str) -> tuple[bool, str]:
    """Validate registration fields, email first."""
    if not email or "@" not in email:
        return False, "Valid email is required"
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    if not name or len(name.strip()) < MIN_NAME_LENGTH:
        return False, "Full name is required"
    return True, "Registration is valid"
