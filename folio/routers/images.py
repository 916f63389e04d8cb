import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from folio.services.image_service import get_post_image
from folio.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


def get_assets_dir():
    return settings.assets_path


@router.get(settings.asset_url_prefix + "/{slug}/{image_path:path}")
async def get_image(slug: str, image_path: str, assets_dir=Depends(get_assets_dir)):
    """
    Serve a post image from the assets directory
    """
    image_data, content_type = get_post_image(slug, image_path, assets_dir=assets_dir)

    if not image_data or not content_type:
        raise HTTPException(status_code=404, detail="Image not found")

    # Set proper content length header
    headers = {
        "Content-Length": str(len(image_data)),
        "Accept-Ranges": "bytes",
    }

    return Response(content=image_data, media_type=content_type, headers=headers)
