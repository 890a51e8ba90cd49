"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./qwer_fansite.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = [
        "https://qwer-fansite-admin.vercel.app",
        "https://qwer-fansite-front.vercel.app",
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Admin login (단일 관리자 계정)
    ADMIN_EMAIL: str = "admin@test.com"
    ADMIN_PASSWORD: str = "qwer1018"

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    AUTH_COOKIE_NAME: str = "token"
    COOKIE_SECURE: bool = False

    # Blob storage
    UPLOAD_DIR: str = "uploads"
    PUBLIC_UPLOAD_BASE_URL: str = ""
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpg", "jpeg", "png"]
    ALBUM_COVER_MAX_SIZE: int = 20 * 1024 * 1024  # 20 MB
    GALLERY_ITEM_MAX_SIZE: int = 10 * 1024 * 1024  # 10 MB
    GALLERY_BATCH_MAX_SIZE: int = 30 * 1024 * 1024  # 30 MB
    PROFILE_IMAGE_MAX_SIZE: int = 20 * 1024 * 1024
    MAIN_IMAGE_MAX_SIZE: int = 20 * 1024 * 1024

    # Prebuilt frontend bundles (비어 있으면 마운트하지 않음)
    ADMIN_FRONTEND_DIR: str = ""
    PUBLIC_FRONTEND_DIR: str = ""

    class Config:
        # 실행 cwd와 무관하게 backend/.env를 로드한다.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
