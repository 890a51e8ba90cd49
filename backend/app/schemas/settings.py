"""사이트 설정(메인 배너, SNS 링크) 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from enum import Enum
from typing import List

from app.schemas.common import CamelModel


class SnsPlatform(str, Enum):
    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"
    TWITTER = "twitter"
    CAFE = "cafe"
    SHOP = "shop"


DEFAULT_SNS_IDS = [p.value for p in SnsPlatform]


class SnsLink(CamelModel):
    id: SnsPlatform
    url: str = ""


class SiteSettingsOut(CamelModel):
    main_image: str = ""
    sns_links: List[SnsLink] = []
