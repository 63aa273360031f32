# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
Error handling utilities for creating annotated ToolErrors with user guidance.
"""

from fastmcp.exceptions import ToolError

from ..topics.errors import InvalidTopicFormat, TopicError, TopicNotFound


def annotated_error(
    problem: str,
    likely_cause: str,
    next_steps: str,
    original_error: str | None = None,
) -> ToolError:
    """
    Create a well-annotated ToolError with context and guidance.

    Args:
        problem: Clear description of what went wrong
        likely_cause: Most probable reason for the failure
        next_steps: Actionable advice for resolving the issue
        original_error: Optional underlying error details

    Returns:
        ToolError with structured message including context and guidance
    """
    message = f"{problem}. This likely means {likely_cause}. Next steps: {next_steps}"
    if original_error:
        message += f". Original error: {original_error}"
    return ToolError(message)


def topic_error(error: TopicError) -> ToolError:
    """Convert a topic loading error into an annotated ToolError."""
    match error:
        case TopicNotFound():
            return annotated_error(
                problem=f"Help topic '{error.topic}' was not found",
                likely_cause="the name is misspelled or the topic was removed",
                next_steps="use topics_list to find the available topic names",
            )
        case InvalidTopicFormat():
            return annotated_error(
                problem=f"Help topic '{error.topic}' could not be parsed",
                likely_cause="the topic document is malformed",
                next_steps="report the problem to the knowledge base maintainers",
                original_error=error.reason,
            )
        case _:
            return annotated_error(
                problem=f"Help topic '{error.topic}' could not be read",
                likely_cause="the knowledge base files are not accessible",
                next_steps="retry later, or report the problem if it persists",
                original_error=error.reason,
            )
