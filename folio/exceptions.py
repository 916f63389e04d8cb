class PostError(Exception):
    """Base class for errors raised while loading or rendering posts."""


class PostNotFoundError(PostError, LookupError):
    def __init__(self, slug: str):
        super().__init__(f"Post not found: {slug}")
        self.slug = slug


class PostStoreError(PostError, OSError):
    """The posts directory or a post file could not be read."""


class PostParseError(PostError, ValueError):
    """A post file has malformed or incomplete front-matter."""

    def __init__(self, slug: str, reason: str):
        super().__init__(f"Invalid front-matter in post {slug}: {reason}")
        self.slug = slug
        self.reason = reason


class InvalidSlugError(PostError, ValueError):
    def __init__(self, slug):
        super().__init__(f"Invalid slug: {slug!r}")
        self.slug = slug
