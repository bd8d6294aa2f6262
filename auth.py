import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError, ExpiredSignatureError
from fastapi.security import OAuth2PasswordBearer
from fastapi import Depends

from database import UserORM
from database.db import get_db
from sqlalchemy.orm import Session
from core.exceptions import UnauthorizedException
from config import settings

logger = logging.getLogger(__name__)

# auto_error=False: la falta de token se resuelve aquí y se responde con {"error": ...}
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token including standard claims (sub, iat, exp, iss, aud).

    `data` should include an identifier under the "sub" key (user id).
    """
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.jwt_access_minutes))
    if "sub" not in to_encode:
        raise ValueError("`data` must include `sub` (subject / user id)")
    to_encode["sub"] = str(to_encode["sub"])
    to_encode.update({
        "exp": expire,
        "iat": now,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience
    })
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def issue_token_for(user: UserORM) -> str:
    return create_access_token({"sub": user.id, "email": user.email})


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token.

    Validates signature, expiration, issuer and audience. Raises
    UnauthorizedException for any invalid token state.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )
        return payload
    except ExpiredSignatureError:
        logger.info("Token expirado")
        raise UnauthorizedException("Token expired")
    except JWTError as e:
        logger.info(f"Token inválido o claim mismatch: {e}")
        raise UnauthorizedException("Invalid or expired token")


def _user_from_token(token: str, db: Session) -> UserORM:
    payload = decode_token(token)
    user_id = payload.get("sub")
    try:
        user = db.get(UserORM, int(user_id))
    except (TypeError, ValueError):
        raise UnauthorizedException("Invalid token: missing subject")
    if not user:
        raise UnauthorizedException("User not found")
    return user


def get_current_user_dep(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> UserORM:
    """Dependencia que exige un bearer token válido."""
    if not token:
        raise UnauthorizedException()
    return _user_from_token(token, db)


def get_optional_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> Optional[UserORM]:
    """Como get_current_user_dep, pero sin token devuelve None.

    Un token presente pero inválido sigue respondiendo 401.
    """
    if not token:
        return None
    return _user_from_token(token, db)
