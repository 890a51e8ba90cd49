"""관리자 로그인 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class SessionOut(BaseModel):
    authenticated: bool
    email: Optional[str] = None
