"""FastAPI 애플리케이션 진입점. 미들웨어, API 라우터, 업로드/정적 프론트엔드 서빙을 등록합니다."""

import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from app.config import settings
from app.core.exceptions import register_exception_handlers
from app.database import Base, engine
from app.middleware.auth_middleware import AdminGateMiddleware
import app.models  # noqa: F401 - 모델 import로 metadata 등록
from app.routers import album, auth, gallery, members, notice, schedule, video
from app.routers import settings as settings_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="QWER 팬사이트 백엔드",
    description="팬사이트 공개 페이지와 관리자 대시보드를 위한 콘텐츠 관리 API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(AdminGateMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Register all routers
app.include_router(auth.router)
app.include_router(album.router)
app.include_router(gallery.router)
app.include_router(notice.router)
app.include_router(schedule.router)
app.include_router(video.router)
app.include_router(members.router)
app.include_router(settings_router.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "QWER 팬사이트 백엔드"}


# Static file serving for uploads
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")

# Serve prebuilt admin/public bundles
if settings.ADMIN_FRONTEND_DIR and os.path.exists(settings.ADMIN_FRONTEND_DIR):
    app.mount("/admin", StaticFiles(directory=settings.ADMIN_FRONTEND_DIR, html=True), name="admin")
if settings.PUBLIC_FRONTEND_DIR and os.path.exists(settings.PUBLIC_FRONTEND_DIR):
    app.mount("/", StaticFiles(directory=settings.PUBLIC_FRONTEND_DIR, html=True), name="frontend")
