# folio/markdown/renderer.py

import logging
from typing import Optional

import markdown
from pymdownx import emoji

from folio.exceptions import InvalidSlugError
from folio.markdown.extensions.asset_paths import AssetPathExtension
from folio.settings import settings
from folio.utils import is_valid_slug

logger = logging.getLogger(__name__)


def build_markdown(slug: str, asset_root: str) -> markdown.Markdown:
    """
    Markdown converter for a single post.

    Stages, in order:
        1. block/inline parsing, with :shortcode: emoji turned into unicode glyphs
        2. raw HTML kept aside verbatim (never escaped)
        3. relative <img> sources rewritten to /{asset_root}/{slug}/...
        4. serialization to HTML, raw HTML put back in place
    """
    return markdown.Markdown(
        extensions=[
            "fenced_code",
            "pymdownx.emoji",
            AssetPathExtension(scope=slug, asset_root=asset_root),
        ],
        extension_configs={
            "pymdownx.emoji": {
                "emoji_index": emoji.gemoji,
                "emoji_generator": emoji.to_alt,
            },
        },
    )


def render_markdown(text: str, slug: str, asset_root: Optional[str] = None) -> str:
    """
    Convert a post body to HTML.

    The result is meant to be injected into a page as is. Post files are
    trusted content, so embedded HTML is passed through without sanitizing.

    Args:
        text: Raw markdown body
        slug: Post slug, used to namespace relative image sources
        asset_root: Leading URL segment for images (defaults to settings.ASSET_ROOT)
    """
    if not is_valid_slug(slug):
        raise InvalidSlugError(slug)

    # A fresh converter per call: the element tree is never shared
    md = build_markdown(slug, asset_root or settings.ASSET_ROOT)
    html = md.convert(text or "")

    logger.debug(f"Rendered post {slug}: {len(text or '')} -> {len(html)} chars")
    return html
