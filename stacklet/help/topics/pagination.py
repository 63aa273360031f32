# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from functools import reduce
from typing import Iterable

from .index import Index
from .models import Pagination


def filter_to_tag(index: Index, tag: str) -> Index:
    """Topics with the given tag, in index order."""
    return [topic for topic in index if topic.has_tag(tag)]


def filter_to_tags(index: Index, tags: Iterable[str]) -> Index:
    """Topics with all the given tags, in index order."""
    return reduce(filter_to_tag, tags, index)


def paginate(index: Index, pagination: Pagination, strict_page_size: bool = False) -> Index:
    """Return the page of the index selected by pagination.

    Sets `pagination.more_available` when topics remain after the page.

    Pages are sliced as `[skip:limit]` unless `strict_page_size` is set, in
    which case they are `[skip:skip+limit]`. With the former, pages after the
    first one are shorter than `limit` (or empty when `skip >= limit`).
    """
    skip, limit = pagination.skip, pagination.limit
    pagination.more_available = False

    if len(index) > skip + limit:
        pagination.more_available = True
        end = skip + limit if strict_page_size else limit
        return index[skip:end]
    if len(index) < skip:
        return []
    return index[skip:]
