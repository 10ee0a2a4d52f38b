"""Session services - JWT encoding/decoding and the FastAPI session dependency.

Tokens are minted by the external login service; this app only verifies them.
``create_access_token`` exists for that service's shared code path and for tests.
"""
from datetime import datetime, timezone, timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError

from auth.models import Session
from common.exceptions import InvalidSessionError
from config import Config
from utils.logger import get_logger

logger = get_logger("auth.services")

security = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token for a user."""
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(days=Config.ACCESS_TOKEN_EXPIRE_DAYS)
    to_encode = {"sub": user_id, "exp": int(expire.timestamp())}
    return jwt.encode(to_encode, Config.SECRET_KEY, algorithm=Config.ALGORITHM)


def decode_token(token: str) -> Session:
    """Decode a JWT token into a Session."""
    try:
        payload = jwt.decode(token, Config.SECRET_KEY, algorithms=[Config.ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise InvalidSessionError(f"JWT validation failed: {e}")

    uid = payload.get("sub")
    if not uid:
        logger.warning("JWT payload has no subject")
        raise InvalidSessionError("token has no subject")
    return Session(user_id=str(uid))


# ---------- Session dependency ----------
def get_current_session(creds: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> Session:
    """Get the caller's session from the Authorization header."""
    if creds is None or not creds.credentials:
        raise InvalidSessionError("missing bearer token")
    return decode_token(creds.credentials)
