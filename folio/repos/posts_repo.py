import logging
import os
from pathlib import Path
from typing import List, Optional

from folio.exceptions import PostNotFoundError, PostParseError, PostStoreError
from folio.settings import settings
from folio.utils import is_valid_slug

logger = logging.getLogger(__name__)


class FilePostsRepo:
    def __init__(self, posts_dir: Optional[Path] = None, extension: Optional[str] = None):
        self.posts_dir = Path(posts_dir) if posts_dir is not None else settings.posts_path
        self.extension = extension or settings.POST_EXTENSION

    def list_slugs(self) -> List[str]:
        """Slugs of the post files, in directory order."""
        try:
            names = os.listdir(self.posts_dir)
        except OSError as e:
            raise PostStoreError(
                f"Failed to list posts directory {self.posts_dir}: {e}"
            ) from e

        slugs = []
        for name in names:
            if not name.endswith(self.extension):
                continue
            if not (self.posts_dir / name).is_file():
                continue
            slug = self.normalize_slug(name)
            if not is_valid_slug(slug):
                logger.warning(f"Ignoring post file with unusable name: {name}")
                continue
            slugs.append(slug)
        return slugs

    def normalize_slug(self, slug: str) -> str:
        return slug.removesuffix(self.extension)

    def read_post(self, slug: str) -> str:
        """Return the raw text of the post file for a slug (extension optional)."""
        real_slug = self.normalize_slug(slug)
        if not is_valid_slug(real_slug):
            raise PostNotFoundError(slug)
        if not self.posts_dir.is_dir():
            raise PostStoreError(f"Posts directory not found: {self.posts_dir}")

        path = self.posts_dir / f"{real_slug}{self.extension}"
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            logger.warning(f"No post file for slug {real_slug}")
            raise PostNotFoundError(real_slug) from e
        except OSError as e:
            raise PostStoreError(f"Failed to read post file {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise PostParseError(real_slug, f"not valid UTF-8: {e}") from e

        logger.debug(f"Read {len(text)} chars from {path}")
        return text
