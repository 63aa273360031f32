# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
On-disk storage of help topics.

Content root layout:

    pages/<name>/page.md    front-matter, a blank line, then the markdown body
    pages/<name>/<asset>    files referenced by the topic, e.g. images
    assets/<path>           site-wide static files
    views/<template>        templates overriding the packaged ones
"""

import re

from pathlib import Path
from typing import Self

import yaml

from pydantic import ValidationError

from ..settings import Settings
from ..utils.resources import get_package_file
from .errors import InvalidTopicFormat, TopicNotFound, TopicReadError
from .models import FrontMatter, Topic
from .rendering import MarkdownRenderer


PAGE_FILE = "page.md"

# an empty line, matched at its start
BLANK_LINE = re.compile(r"^$", re.MULTILINE)


class TopicStore:
    """Read topics from a content root directory."""

    def __init__(self, root: Path, renderer: MarkdownRenderer | None = None):
        self.root = Path(root)
        self.renderer = renderer or MarkdownRenderer()

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(settings.root_path)

    @property
    def pages_dir(self) -> Path:
        return self.root / "pages"

    @property
    def assets_dir(self) -> Path:
        return self.root / "assets"

    @property
    def views_dir(self) -> Path:
        return self.root / "views"

    def page_path(self, name: str) -> Path:
        """Path of the document for a topic."""
        _check_segment(name, name)
        return self.pages_dir / name / PAGE_FILE

    def asset_path(self, topic: str, asset: str) -> Path:
        """Path of an existing file in a topic folder."""
        _check_segment(topic, topic)
        _check_segment(topic, asset)
        path = self.pages_dir / topic / asset
        if not path.is_file():
            raise TopicNotFound(topic, f"asset '{asset}' not found")
        return path

    def site_asset_path(self, path: str) -> Path:
        """Path of an existing site-wide asset, falling back to the packaged ones."""
        for assets_dir in (self.assets_dir, get_package_file("assets")):
            base = assets_dir.resolve()
            full_path = (base / path).resolve()
            # ensure the resolved path is within the assets directory
            if not full_path.is_relative_to(base):
                break
            if full_path.is_file():
                return full_path
        raise TopicNotFound(path, "site asset not found")

    def topic_names(self) -> list[str]:
        """Names of all topic folders, sorted."""
        try:
            entries = sorted(self.pages_dir.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            raise TopicReadError(str(self.pages_dir), f"can't list topics: {e}") from e
        return [entry.name for entry in entries if entry.is_dir()]

    def read(self, name: str) -> Topic:
        """Load a topic document, without rendering it."""
        path = self.page_path(name)
        try:
            text = path.read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError) as e:
            raise TopicNotFound(name) from e
        except UnicodeDecodeError as e:
            raise InvalidTopicFormat(name, "document is not valid UTF-8") from e
        except OSError as e:
            raise TopicReadError(name, f"can't read document: {e}") from e

        header, body = split_document(name, text)
        front_matter = parse_front_matter(name, header)
        return Topic(
            name=name,
            title=front_matter.title,
            description=front_matter.description,
            tags=front_matter.tags,
            content=body,
        )

    def hydrate(self, name: str) -> Topic:
        """Load a topic document and render its markup."""
        topic = self.read(name)
        topic.markup = self.renderer.render(topic.content, topic.name)
        return topic


def split_document(name: str, text: str) -> tuple[str, str]:
    """Split a document into front-matter and body on the first blank line."""
    text = text.replace("\r\n", "\n")
    parts = BLANK_LINE.split(text, maxsplit=1)
    if len(parts) != 2:
        raise InvalidTopicFormat(name, "no blank line between front-matter and body")
    header, body = parts
    if not body.strip():
        raise InvalidTopicFormat(name, "empty body")
    return header, body


def parse_front_matter(name: str, header: str) -> FrontMatter:
    """Parse a YAML front-matter block.

    Only the first YAML document is used, so the block may be fenced with `---`.
    Scalars are kept as written, so `title: 2024` or `tags: [yes]` are text.
    """
    try:
        data = next(yaml.load_all(header, Loader=yaml.BaseLoader), None)
    except yaml.YAMLError as e:
        raise InvalidTopicFormat(name, f"invalid front-matter: {e}") from e
    if not isinstance(data, dict):
        raise InvalidTopicFormat(name, "front-matter is not a mapping")
    try:
        return FrontMatter.model_validate(data)
    except ValidationError as e:
        raise InvalidTopicFormat(name, f"invalid front-matter: {e}") from e


def _check_segment(topic: str, segment: str) -> None:
    # names map to a single directory entry, never to a nested or parent path
    if segment in ("", ".", "..") or "/" in segment or "\\" in segment or "\0" in segment:
        raise TopicNotFound(topic, f"invalid name '{segment}'")
