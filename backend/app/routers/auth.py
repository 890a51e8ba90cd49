"""Auth 기능 API 라우터입니다. 관리자 로그인/로그아웃과 세션 확인을 제공합니다."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from app.config import settings
from app.middleware.auth_middleware import get_optional_admin
from app.schemas.auth import LoginRequest, SessionOut
from app.schemas.common import envelope
from app.services.auth_service import authenticate, create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login")
def login(request: LoginRequest, response: Response):
    if not authenticate(request.email, request.password):
        logger.warning("[auth] login failed for %s", request.email)
        raise HTTPException(status_code=401, detail="로그인 실패")

    token = create_access_token(request.email)
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        httponly=True,
        path="/",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        samesite="strict",
        secure=settings.COOKIE_SECURE,
    )
    logger.info("[auth] admin logged in")
    return envelope(message="로그인 성공")


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(
        key=settings.AUTH_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="strict",
        secure=settings.COOKIE_SECURE,
    )
    return envelope(message="로그아웃 성공")


@router.get("/session")
def session(admin_email: str | None = Depends(get_optional_admin)):
    return envelope(SessionOut(authenticated=admin_email is not None, email=admin_email))
