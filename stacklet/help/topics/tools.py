# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from typing import Annotated, Any, Callable

from fastmcp import Context
from pydantic import Field, PositiveInt

from ..lifespan import help_state
from ..settings import SETTINGS
from ..utils.error import topic_error
from .errors import TopicError
from .models import Pagination, TopicContent, TopicsPage, TopicSummary
from .pagination import filter_to_tags, paginate


def tools() -> list[Callable[..., Any]]:
    """List of available help topic tools."""
    return [
        topics_list,
        topic_read,
    ]


def topics_list(
    ctx: Context,
    tagged: Annotated[
        list[str] | None,
        Field(description="Only list topics carrying all of these tags"),
    ] = None,
    skip: Annotated[int, Field(ge=0, description="Number of topics to skip")] = 0,
    limit: Annotated[
        PositiveInt | None,
        Field(description="Maximum number of topics to return"),
    ] = None,
) -> TopicsPage:
    """
    Browse the help knowledge base.

    Returns a page of help topics with their name, title, description and tags.
    Pass tags in `tagged` to narrow the listing to topics carrying all of them,
    and use `skip` and `limit` to page through results while `more_available`
    is true.

    Use topic_read() with any of the returned topic names to get the content.
    """
    try:
        index = help_state(ctx).index.get()
    except TopicError as e:
        raise topic_error(e) from e

    pagination = Pagination(
        skip=skip,
        limit=min(limit or SETTINGS.default_page_size, SETTINGS.max_page_size),
    )
    page = paginate(
        filter_to_tags(index, tagged or []),
        pagination,
        strict_page_size=SETTINGS.strict_page_size,
    )
    return TopicsPage(
        topics=[TopicSummary.from_topic(topic) for topic in page],
        skip=pagination.skip,
        limit=pagination.limit,
        more_available=pagination.more_available,
        note="Use topic_read with any of these topic names to read the content",
    )


def topic_read(
    ctx: Context,
    name: Annotated[
        str,
        Field(min_length=1, description="Name of the help topic to read (e.g. 'getting-started')"),
    ],
) -> TopicContent:
    """
    Read a help topic from the knowledge base.

    Returns the topic metadata and its full content in Markdown format. Topics
    are always read fresh, so edits show up here before they appear in listings.
    """
    try:
        topic = help_state(ctx).store.read(name)
    except TopicError as e:
        raise topic_error(e) from e
    return TopicContent.from_topic(topic)
