# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from datetime import date
from typing import Any, Mapping, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FrontMatter(BaseModel):
    """Metadata block at the top of a topic document."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)

    @field_validator("title", mode="before")
    @classmethod
    def scalar_title(cls, value: Any) -> Any:
        return _scalar_text(value)

    @field_validator("description", mode="before")
    @classmethod
    def scalar_description(cls, value: Any) -> Any:
        return "" if value is None else _scalar_text(value)

    @field_validator("tags", mode="before")
    @classmethod
    def scalar_tags(cls, value: Any) -> Any:
        if value is None or value == "":
            return []
        if isinstance(value, list):
            return [_scalar_text(tag) for tag in value]
        return value

    @field_validator("tags")
    @classmethod
    def unique_tags(cls, value: list[str]) -> list[str]:
        # keep the order from the document for display
        return list(dict.fromkeys(value))


def _scalar_text(value: Any) -> Any:
    # plain scalars are text in front-matter; mappings and lists are left to fail validation
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, int | float):
        return str(value)
    return value


class Topic(BaseModel):
    """A help topic.

    The same model is used in two states: hydrated, with the markdown content and
    rendered markup, and stubbed, with metadata only. Check `is_stubbed` before
    relying on `content` or `markup`.
    """

    name: str = Field(..., description="Topic slug, the name of its folder")
    title: str = Field(default="", description="Human-readable title")
    description: str = Field(default="", description="Short summary of the topic")
    tags: list[str] = Field(default_factory=list, description="Tags, in document order")
    content: str = Field(default="", description="Markdown source of the topic body")
    markup: str = Field(default="", description="Rendered HTML of the topic body")

    @property
    def is_stubbed(self) -> bool:
        return not self.content and not self.markup

    def stub_out(self) -> None:
        """Drop the body and markup, keeping metadata."""
        self.content = ""
        self.markup = ""

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


class Pagination(BaseModel):
    """Paging state for a listing query.

    `more_available` is set by `paginate`.
    """

    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=10, gt=0)
    more_available: bool = False

    @classmethod
    def from_query(
        cls, params: Mapping[str, str], default_page_size: int = 10, max_page_size: int = 100
    ) -> Self:
        """Build pagination from `skip` and `limit` query values.

        Invalid values fall back to defaults rather than failing the request.
        """
        skip = _int_param(params, "skip")
        if skip is None or skip < 0:
            skip = 0
        limit = _int_param(params, "limit")
        if limit is None or limit <= 0:
            limit = default_page_size
        return cls(skip=skip, limit=min(limit, max_page_size))

    def next_page(self) -> Self | None:
        if not self.more_available:
            return None
        return type(self)(skip=self.skip + self.limit, limit=self.limit)

    def previous_page(self) -> Self | None:
        if self.skip == 0:
            return None
        return type(self)(skip=max(self.skip - self.limit, 0), limit=self.limit)


def _int_param(params: Mapping[str, str], name: str) -> int | None:
    value = params.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class TopicSummary(BaseModel):
    """Metadata for a topic in a listing."""

    name: str = Field(..., description="Topic name, to use with topic_read")
    title: str = Field(..., description="Human-readable title of the topic")
    description: str = Field(..., description="Short summary of the topic")
    tags: list[str] = Field(..., description="Tags attached to the topic")

    @classmethod
    def from_topic(cls, topic: Topic) -> Self:
        return cls(
            name=topic.name, title=topic.title, description=topic.description, tags=topic.tags
        )


class TopicsPage(BaseModel):
    """A page of help topics."""

    topics: list[TopicSummary] = Field(..., description="Topics in this page")
    skip: int = Field(..., description="Number of topics skipped before this page")
    limit: int = Field(..., description="Requested page size")
    more_available: bool = Field(..., description="Whether more topics follow this page")
    note: str = Field(..., description="Usage note about how to read these topics")


class TopicContent(BaseModel):
    """Full content of a help topic."""

    name: str = Field(..., description="Topic name")
    title: str = Field(..., description="Human-readable title of the topic")
    description: str = Field(..., description="Short summary of the topic")
    tags: list[str] = Field(..., description="Tags attached to the topic")
    content: str = Field(..., description="Full markdown content of the topic")

    @classmethod
    def from_topic(cls, topic: Topic) -> Self:
        return cls(
            name=topic.name,
            title=topic.title,
            description=topic.description,
            tags=topic.tags,
            content=topic.content,
        )
