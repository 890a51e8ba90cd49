"""Seed the document store with member profiles, default settings and fixed events."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.services.document_store import DocumentStore
from app.services.settings_service import COLLECTION as SETTINGS_COLLECTION, DOC_ID as SETTINGS_DOC_ID
from app.services.profile_service import COLLECTION as PROFILE_COLLECTION
from app.services.schedule_service import COLLECTION as SCHEDULE_COLLECTION

PROFILES = {
    "All": {
        "name": "QWER",
        "texts": ["Debut : 2023.10.18\nMember : Chodan, Magenta, Hina, Siyeon"],
        "sns": {
            "youtube": "https://www.youtube.com/@QWER_Band_official",
            "instagram": "https://www.instagram.com/qwerband_official",
            "twitter": "https://x.com/official_QWER",
            "tiktok": "https://www.tiktok.com/@qwerband_official",
            "weverse": "https://weverse.io/qwer/artistpedia",
            "cafe": "https://cafe.naver.com/eggkim",
        },
    },
    "Q": {
        "name": "Chodan",
        "texts": ["Name : 쵸단\nBirth : 1998.11.01.\nPosition : Leader, Drum, Sub-vocal"],
        "sns": {
            "youtube": "https://www.youtube.com/@chodan_",
            "instagram": "https://www.instagram.com/choda._.n",
            "tiktok": "https://www.tiktok.com/@chodan__",
            "cafe": "https://cafe.naver.com/chodancafe",
        },
    },
    "W": {
        "name": "Magenta",
        "texts": ["Name : 마젠타\nBirth : 1997.06.02.\nPosition : Base, Sub-vocal"],
        "sns": {
            "instagram": "https://www.instagram.com/magenta_6262",
            "tiktok": "https://www.tiktok.com/@magenta6262",
            "twitter": "https://x.com/magentaof62",
            "cafe": "https://cafe.naver.com/magentacafe",
        },
    },
    "E": {
        "name": "Hina",
        "texts": ["Name : 히나\nBirth : 2001.01.30.\nPosition : Guitar, Keyboard, Sub-vocal"],
        "sns": {
            "youtube": "https://www.youtube.com/@hapycb",
            "instagram": "https://www.instagram.com/i_am_young22",
            "tiktok": "https://www.tiktok.com/@i_am_young22",
            "twitter": "https://x.com/hapycb",
            "cafe": "https://cafe.naver.com/nyangworld",
        },
    },
    "R": {
        "name": "Siyeon",
        "texts": ["Name : 시연\nBirth : 2000.05.16.\nPosition : Main-vocal, Guitar"],
        "sns": {
            "instagram": "https://www.instagram.com/siyo.co.kr",
            "tiktok": "https://www.tiktok.com/@siyoming___qwer",
            "twitter": "https://x.com/siyo_min",
        },
    },
}

SNS_LINKS = [
    {"id": "instagram", "url": "https://www.instagram.com/qwerband_official/#"},
    {"id": "youtube", "url": "https://www.youtube.com/channel/UCgD0APk2x9uBlLM0UsmhQjw"},
    {"id": "twitter", "url": "https://x.com/official_QWER"},
    {"id": "cafe", "url": "https://cafe.naver.com/eggkim"},
    {"id": "shop", "url": "https://qwershop.kr/index.html"},
]

FIXED_EVENTS = [
    {
        "start": "2025-08-16T19:40:00",
        "end": "2025-08-16T20:30:00",
        "type": "C",
        "title": "Concert",
        "allDay": False,
    },
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        store = DocumentStore(db)
        if store.exists(SETTINGS_COLLECTION, SETTINGS_DOC_ID):
            print("Database already seeded. Skipping.")
            return

        for member_id, profile in PROFILES.items():
            store.set(PROFILE_COLLECTION, member_id, {**profile, "images": []})

        store.set(SETTINGS_COLLECTION, SETTINGS_DOC_ID, {"mainImage": "", "snsLinks": SNS_LINKS})

        for event in FIXED_EVENTS:
            store.add(SCHEDULE_COLLECTION, event)

        print(f"Seeded {len(PROFILES)} profiles, settings and {len(FIXED_EVENTS)} event(s).")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
