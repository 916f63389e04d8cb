import logging
from typing import List, Optional

import frontmatter
import yaml
from pydantic import ValidationError

from folio.exceptions import PostParseError
from folio.markdown.renderer import render_markdown
from folio.schemas.blog import PostFrontMatter, PostRecord

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, asset_root: Optional[str] = None):
        self.repo = repo
        self.asset_root = asset_root

    def get_post(self, slug: str) -> PostRecord:
        """Load one post, drafts included, with its markdown body unrendered."""
        text = self.repo.read_post(slug)
        return parse_post_data(text, self.repo.normalize_slug(slug))

    def list_posts(self) -> List[PostRecord]:
        """
        All published posts, newest first.

        Dates are compared as plain strings, so they must share one sortable
        format (ISO 8601). Any unreadable or malformed post aborts the listing.
        """
        posts = [self.get_post(slug) for slug in self.repo.list_slugs()]
        published = [post for post in posts if not post.draft]
        published.sort(key=lambda post: post.date, reverse=True)
        logger.debug(
            f"Listed {len(published)} posts ({len(posts) - len(published)} drafts hidden)"
        )
        return published

    def get_rendered_post(self, slug: str) -> PostRecord:
        post = self.get_post(slug)
        html = render_markdown(post.content, post.slug, asset_root=self.asset_root)
        return post.model_copy(update={"content": html})


def parse_post_data(text: str, slug: str) -> PostRecord:
    """Split front-matter from body and validate the metadata."""
    try:
        parsed = frontmatter.loads(text)
    except yaml.YAMLError as e:
        raise PostParseError(slug, f"malformed YAML: {e}") from e

    try:
        metadata = PostFrontMatter.model_validate(parsed.metadata)
    except ValidationError as e:
        raise PostParseError(slug, _describe_errors(e)) from e

    return PostRecord(slug=slug, content=parsed.content, **metadata.model_dump())


def _describe_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
