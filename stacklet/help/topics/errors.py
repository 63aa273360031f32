# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
Errors raised while loading help topics.
"""


class TopicError(Exception):
    """Base class for topic loading errors."""

    def __init__(self, topic: str, reason: str):
        self.topic = topic
        self.reason = reason
        super().__init__(f"Topic '{topic}': {reason}")


class TopicNotFound(TopicError):
    """The topic, its document or a requested asset does not exist."""

    def __init__(self, topic: str, reason: str = "not found"):
        super().__init__(topic, reason)


class InvalidTopicFormat(TopicError):
    """The topic document can't be split or its front-matter is malformed."""


class TopicReadError(TopicError):
    """A filesystem entry exists but can't be read."""
