import textwrap

import pytest

from folio.exceptions import PostNotFoundError


def write_post(posts_dir, slug: str, front_matter: str, body: str = "Body.", ext=".md"):
    """Write a post file with a YAML front-matter block."""
    text = f"---\n{textwrap.dedent(front_matter).strip()}\n---\n{body}\n"
    path = posts_dir / f"{slug}{ext}"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "_posts"
    directory.mkdir()
    return directory


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, texts: dict[str, str], order=None):
        self.texts = texts
        self.order = order or list(texts)
        self.reads = []

    def list_slugs(self):
        return list(self.order)

    def normalize_slug(self, slug: str) -> str:
        return slug.removesuffix(".md")

    def read_post(self, slug: str) -> str:
        slug = self.normalize_slug(slug)
        self.reads.append(slug)
        if slug not in self.texts:
            raise PostNotFoundError(slug)
        return textwrap.dedent(self.texts[slug]).lstrip()


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested = []

    def list_posts(self):
        return self._list_posts_return

    def get_rendered_post(self, slug: str):
        self.requested.append(slug)
        if self._get_post_return is None:
            raise PostNotFoundError(slug)
        return self._get_post_return
