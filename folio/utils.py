import re

SLUG_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]*$")


def is_valid_slug(slug) -> bool:
    return isinstance(slug, str) and bool(SLUG_RE.match(slug))
