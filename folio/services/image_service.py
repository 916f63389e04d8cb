import logging
from pathlib import Path
from typing import Optional, Tuple

from folio.settings import settings
from folio.utils import is_valid_slug

logger = logging.getLogger(__name__)


def resolve_image_path(assets_dir: Path, slug: str, image_path: str) -> Optional[Path]:
    """
    Map a post image URL onto the assets directory.
    Returns None when the path would leave the post's own folder.
    """
    if not is_valid_slug(slug) or not image_path:
        return None
    post_dir = (assets_dir / slug).resolve()
    candidate = (post_dir / image_path).resolve()
    if post_dir not in candidate.parents:
        return None
    return candidate


def get_post_image(
    slug: str, image_path: str, assets_dir: Optional[Path] = None
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Read a post image from disk
    """
    assets_dir = Path(assets_dir) if assets_dir is not None else settings.assets_path
    path = resolve_image_path(assets_dir, slug, image_path)
    if path is None:
        logger.warning(f"Rejected image path for {slug}: {image_path}")
        return None, None

    try:
        image_data = path.read_bytes()
    except (FileNotFoundError, IsADirectoryError):
        logger.warning(f"Image not found: {slug}/{image_path}")
        return None, None
    except OSError as e:
        logger.error(f"Error reading image {path}: {e}")
        return None, None

    return image_data, get_content_type_from_filename(image_path)


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    elif filename.endswith(".avif"):
        return "image/avif"
    else:
        return "application/octet-stream"
