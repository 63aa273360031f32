# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
Index of all help topics, used for listings.
"""

from functools import partial
from typing import Callable, Self

from fastmcp.utilities.logging import get_logger

from .models import Topic
from .store import TopicStore


# stubbed topics, in store enumeration order
Index = list[Topic]

logger = get_logger("stacklet.help")


def build_index(store: TopicStore) -> Index:
    """Build the index of all topics in the store.

    Every topic is fully hydrated and then stubbed out. The first failing topic
    aborts the build, so a malformed topic never silently drops out of listings.
    """
    index: Index = []
    for name in store.topic_names():
        topic = store.hydrate(name)
        topic.stub_out()
        index.append(topic)
    logger.info(f"Indexed {len(index)} help topics from {store.pages_dir}")
    return index


class IndexCache:
    """Single-assignment cache for the topic index.

    The first successful build is kept for the lifetime of the cache and never
    replaced. Concurrent first calls may build more than once; only one result
    is stored and all callers see the same index afterwards.
    """

    def __init__(self, build: Callable[[], Index]):
        self._build = build
        self._index: tuple[Topic, ...] | None = None

    @classmethod
    def for_store(cls, store: TopicStore) -> Self:
        return cls(partial(build_index, store))

    @property
    def built(self) -> bool:
        return self._index is not None

    def get(self) -> Index:
        """Return the cached index, building it on first use."""
        if self._index is None:
            index = tuple(self._build())
            if self._index is None:
                self._index = index
        return list(self._index)
