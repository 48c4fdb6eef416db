"""Task image endpoints."""
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from api import config
from api.utils import safe_asset_path

router = APIRouter(prefix="/images", tags=["images"])


@router.get("/{image_path:path}")
def get_image(image_path: str) -> FileResponse:
    """Get task image file."""
    file_path = safe_asset_path(config.IMAGES_DIR, image_path)

    if not file_path.exists() or not file_path.is_file():
        raise HTTPException(status_code=404, detail="Image not found")

    return FileResponse(file_path)
