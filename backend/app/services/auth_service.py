"""Auth Service 도메인 서비스 레이어입니다. 단일 관리자 계정 검증과 토큰 발급/검증을 담당합니다."""

import hmac
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from app.config import settings

ALGORITHM = "HS256"


def authenticate(email: str, password: str) -> bool:
    email_ok = hmac.compare_digest((email or "").encode(), settings.ADMIN_EMAIL.encode())
    password_ok = hmac.compare_digest((password or "").encode(), settings.ADMIN_PASSWORD.encode())
    return email_ok and password_ok


def create_access_token(email: str) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": email, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str | None) -> Optional[dict]:
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    if payload.get("sub") is None:
        return None
    return payload
