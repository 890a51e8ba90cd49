import logging
import os
from typing import Optional

from fastapi import UploadFile, HTTPException
from app.config import settings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads/"


def file_extension(filename: str | None) -> str:
    name = filename or ""
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""


def format_size(num_bytes: int) -> str:
    for unit, scale in (("MB", 1024 * 1024), ("KB", 1024)):
        if num_bytes >= scale:
            return f"{round(num_bytes / scale, 1):g}{unit}"
    return f"{num_bytes}B"


def validate_image(filename: str | None) -> str:
    ext = file_extension(filename)
    allowed = [e.lower() for e in settings.ALLOWED_IMAGE_EXTENSIONS]
    if ext not in allowed:
        raise HTTPException(
            status_code=400,
            detail=f"이미지 파일({', '.join(allowed)})만 업로드 가능합니다.",
        )
    return ext


class StagedUpload:
    """An uploaded file held in memory until it is written to blob storage.

    ``release()`` drops the buffered bytes and closes the underlying upload; it
    is idempotent and is also called when the handle is used as a context
    manager, so every exit path (stored, rejected, replaced) frees the file.
    """

    def __init__(self, filename: str, content: bytes, content_type: str | None = None, source: UploadFile | None = None):
        self.filename = filename
        self.content = content
        self.content_type = content_type or "application/octet-stream"
        self._source = source
        self.released = False

    @property
    def extension(self) -> str:
        return file_extension(self.filename)

    @property
    def size(self) -> int:
        return len(self.content or b"")

    def release(self) -> None:
        if self.released:
            return
        self.released = True
        self.content = b""
        if self._source is not None:
            self._source.file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False


async def stage_upload(file: UploadFile, max_size: int) -> StagedUpload:
    try:
        validate_image(file.filename)
        content = await file.read()
        if len(content) > max_size:
            raise HTTPException(
                status_code=400,
                detail=f"이미지 용량이 {format_size(max_size)}를 초과합니다.",
            )
        if not content:
            raise HTTPException(status_code=400, detail="빈 파일은 업로드할 수 없습니다.")
    except HTTPException:
        await file.close()
        raise
    return StagedUpload(file.filename, content, file.content_type, source=file)


async def stage_uploads(files: list[UploadFile], max_size: int, max_total: Optional[int] = None) -> list[StagedUpload]:
    staged: list[StagedUpload] = []
    try:
        for file in files:
            staged.append(await stage_upload(file, max_size))
        if max_total is not None and sum(item.size for item in staged) > max_total:
            raise HTTPException(
                status_code=400,
                detail=f"전체 업로드 용량이 {format_size(max_total)}를 초과합니다.",
            )
    except HTTPException:
        release_all(staged)
        raise
    return staged


def release_all(uploads) -> None:
    for upload in uploads or []:
        if upload is not None:
            upload.release()


def save_blob(content: bytes, dest_path: str) -> str:
    dest_path = dest_path.replace("\\", "/").lstrip("/")
    path = os.path.join(settings.UPLOAD_DIR, *dest_path.split("/"))
    os.makedirs(os.path.dirname(path), exist_ok=True)

    with open(path, "wb") as f:
        f.write(content)

    logger.info("[blob] stored %s (%d bytes)", dest_path, len(content))
    return f"{settings.PUBLIC_UPLOAD_BASE_URL.rstrip('/')}{UPLOAD_URL_PREFIX}{dest_path}"


def blob_path_from_url(url: str | None) -> Optional[str]:
    if not url:
        return None
    base = settings.PUBLIC_UPLOAD_BASE_URL.rstrip("/")
    if base and url.startswith(base):
        url = url[len(base):]
    if not url.startswith(UPLOAD_URL_PREFIX):
        return None
    rel_path = url[len(UPLOAD_URL_PREFIX):].split("?", 1)[0]
    if not rel_path or ".." in rel_path.split("/"):
        return None
    return rel_path


def delete_blob(url: str | None) -> bool:
    rel_path = blob_path_from_url(url)
    if rel_path is None:
        return False
    abs_path = os.path.join(settings.UPLOAD_DIR, *rel_path.split("/"))
    if not os.path.exists(abs_path):
        return False
    os.remove(abs_path)
    logger.info("[blob] deleted %s", rel_path)
    return True
