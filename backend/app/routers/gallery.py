"""Gallery 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.common import envelope
from app.schemas.gallery import GalleryBatchDelete, GalleryBatchDeleteOut, GalleryItemOut
from app.services import gallery_service
from app.utils.helpers import stage_upload, stage_uploads

router = APIRouter(prefix="/api/gallery", tags=["gallery"])

NOT_FOUND = "이미지를 찾을 수 없습니다."


@router.get("")
def list_gallery(db: Session = Depends(get_db)):
    return envelope([GalleryItemOut.model_validate(item) for item in gallery_service.list_gallery(db)])


@router.post("")
async def upload_gallery(
    images: List[UploadFile] = File(default=[]),
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    files = [f for f in images if f.filename]
    if not files:
        raise HTTPException(status_code=400, detail="업로드할 이미지를 선택해주세요.")
    staged = await stage_uploads(files, settings.GALLERY_BATCH_MAX_SIZE, max_total=settings.GALLERY_BATCH_MAX_SIZE)
    items = gallery_service.upload_gallery_images(db, staged)
    return envelope([GalleryItemOut.model_validate(item) for item in items])


@router.delete("")
def delete_gallery_batch(
    data: GalleryBatchDelete,
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    ids = [i for i in data.ids if i]
    if not ids:
        raise HTTPException(status_code=400, detail="삭제할 이미지를 선택해주세요.")
    result = gallery_service.delete_gallery_items(db, ids)
    return envelope(GalleryBatchDeleteOut.model_validate(result))


@router.get("/{item_id}")
def get_gallery_item(item_id: str, db: Session = Depends(get_db)):
    item = gallery_service.get_gallery_item(db, item_id)
    if not item:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(GalleryItemOut.model_validate(item))


@router.put("/{item_id}")
async def replace_gallery_image(
    item_id: str,
    image: UploadFile = File(...),
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    if gallery_service.get_gallery_item(db, item_id) is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    staged = await stage_upload(image, settings.GALLERY_ITEM_MAX_SIZE)
    item = gallery_service.replace_gallery_image(db, item_id, staged)
    if not item:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(GalleryItemOut.model_validate(item))


@router.delete("/{item_id}")
def delete_gallery_item(item_id: str, db: Session = Depends(get_db), _admin: str = Depends(require_admin)):
    if not gallery_service.delete_gallery_item(db, item_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return envelope(message="삭제되었습니다.")
