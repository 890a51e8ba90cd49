"""멤버 프로필 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Dict, List

from pydantic import field_validator

from app.schemas.common import CamelModel

MEMBER_IDS = ("All", "Q", "W", "E", "R")
MEMBER_NAMES = {
    "All": "QWER",
    "Q": "Chodan",
    "W": "Magenta",
    "E": "Hina",
    "R": "Siyeon",
}
SNS_PLATFORMS = ("youtube", "instagram", "twitter", "tiktok", "weverse", "cafe")
MAX_PROFILE_IMAGES = 4


class MemberProfileData(CamelModel):
    text: List[str] = []
    image: List[str] = []
    sns: Dict[str, str] = {}

    @field_validator("text")
    @classmethod
    def strip_texts(cls, value: List[str]) -> List[str]:
        return [t for t in (item.strip() for item in value) if t]

    @field_validator("image")
    @classmethod
    def keep_urls(cls, value: List[str]) -> List[str]:
        return [u for u in (item.strip() for item in value) if u]

    @field_validator("sns")
    @classmethod
    def known_platforms(cls, value: Dict[str, str]) -> Dict[str, str]:
        unknown = sorted(set(value) - set(SNS_PLATFORMS))
        if unknown:
            raise ValueError(f"지원하지 않는 SNS 플랫폼입니다: {', '.join(unknown)}")
        return {k: v.strip() for k, v in value.items() if v and v.strip()}


class MemberProfileOut(CamelModel):
    id: str
    name: str
    texts: List[str] = []
    images: List[str] = []
    sns: Dict[str, str] = {}
