import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class PostFrontMatter(BaseModel):
    """Metadata block at the top of a post file."""

    # YAML reads `title: 2048` as an int
    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str
    date: str
    description: str = ""
    cover: Optional[str] = None
    draft: bool = False

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_iso(cls, value):
        # YAML turns bare dates into date/datetime objects
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value


class PostSummary(BaseModel):
    slug: str
    title: str
    description: str = ""
    date: str
    cover: Optional[str] = None
    draft: bool = False


class PostRecord(PostSummary):
    # Raw markdown when loaded from disk, rendered HTML after render_markdown.
    content: str = ""
