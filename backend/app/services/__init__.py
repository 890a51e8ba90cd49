"""서비스 레이어 패키지 초기화 모듈입니다."""

from app.services import (
    auth_service,
    album_service,
    gallery_service,
    notice_service,
    schedule_service,
    video_service,
    profile_service,
    settings_service,
)
