import os, jwt
import logging
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Header, HTTPException

JWT_SECRET = os.getenv("JWT_SECRET", "dev_secret_change_me")
JWT_ALG = "HS256"

logger = logging.getLogger(__name__)

def create_token(sub: str, expires_delta: timedelta = timedelta(days=7)) -> str:
    to_encode = {
        "sub": sub,
        "iat": datetime.utcnow(),
        "exp": datetime.utcnow() + expires_delta,
    }
    return jwt.encode(to_encode, JWT_SECRET, algorithm=JWT_ALG)

def decode_token(token: str) -> dict:
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALG])

def extract_token(authorization: Optional[str], x_auth_token: Optional[str]) -> Optional[str]:
    # Bearer header first, x-auth-token as fallback
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    if x_auth_token:
        return x_auth_token.strip() or None
    return None

def auth_learner(
    authorization: str | None = Header(default=None),
    x_auth_token: str | None = Header(default=None, alias="x-auth-token"),
) -> str:
    """Resolve the learner id from a verified JWT."""
    token = extract_token(authorization, x_auth_token)
    if not token:
        raise HTTPException(status_code=401, detail="No token, authorization denied")
    try:
        data = decode_token(token)
    except jwt.PyJWTError as e:
        logger.warning(f"Token decode failed: {e}")
        raise HTTPException(status_code=401, detail="Token is not valid")
    learner_id = data.get("sub") or data.get("id")
    if not learner_id:
        raise HTTPException(status_code=401, detail="Token is not valid")
    return str(learner_id)
