from fastapi import Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import settings
from app.services.auth_service import decode_token

security = HTTPBearer(auto_error=False)

ADMIN_PATH_PREFIX = "/admin"
LOGIN_PATH = "/"


def _token_from_request(request: Request, credentials: HTTPAuthorizationCredentials | None = None) -> str | None:
    token = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


def get_optional_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    payload = decode_token(_token_from_request(request, credentials))
    if payload is None:
        return None
    return payload.get("sub")


def require_admin(admin_email: str | None = Depends(get_optional_admin)) -> str:
    if admin_email is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="로그인이 필요합니다.",
        )
    return admin_email


class AdminGateMiddleware(BaseHTTPMiddleware):
    """Redirects /admin requests without a valid token cookie to the login page."""

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path == ADMIN_PATH_PREFIX or path.startswith(ADMIN_PATH_PREFIX + "/"):
            token = request.cookies.get(settings.AUTH_COOKIE_NAME)
            if decode_token(token) is None:
                return RedirectResponse(url=LOGIN_PATH, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
        return await call_next(request)
