# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from unittest.mock import MagicMock

import pytest

from stacklet.help.topics.errors import InvalidTopicFormat, TopicNotFound, TopicReadError
from stacklet.help.topics.index import IndexCache, build_index
from stacklet.help.topics.models import Topic
from stacklet.help.topics.store import TopicStore

from .testing.topics import ContentRoot


class TestBuildIndex:
    def test_stubbed_topics_in_name_order(self, store: TopicStore, content_root: ContentRoot):
        content_root.add_topic("widgets", tags=["setup"], body="# Widgets\n")
        content_root.add_topic("accounts", description="Managing accounts")

        index = build_index(store)

        assert [topic.name for topic in index] == ["accounts", "widgets"]
        assert all(topic.is_stubbed for topic in index)
        assert index[0].description == "Managing accounts"
        assert index[1].tags == ["setup"]

    def test_skips_files(self, store: TopicStore, content_root: ContentRoot):
        content_root.add_topic("widgets")
        (content_root.pages / "notes.txt").write_text("not a topic")

        assert [topic.name for topic in build_index(store)] == ["widgets"]

    def test_numeric_front_matter(self, store: TopicStore, content_root: ContentRoot):
        content_root.add_topic("accounts")
        content_root.add_document("releases", "title: 2024\ntags:\n  - 2024\n  - v2\n\nBody\n")

        index = build_index(store)

        assert [(topic.name, topic.title) for topic in index] == [
            ("accounts", "Accounts"),
            ("releases", "2024"),
        ]
        assert index[1].tags == ["2024", "v2"]

    def test_empty(self, store: TopicStore):
        assert build_index(store) == []

    def test_malformed_topic_fails_build(self, store: TopicStore, content_root: ContentRoot):
        content_root.add_topic("accounts")
        content_root.add_document("broken", "title: Broken\nno separator\n")
        content_root.add_topic("widgets")

        with pytest.raises(InvalidTopicFormat) as exc_info:
            build_index(store)
        assert exc_info.value.topic == "broken"

    def test_folder_without_document_fails_build(
        self, store: TopicStore, content_root: ContentRoot
    ):
        content_root.add_topic("accounts")
        (content_root.pages / "empty").mkdir()

        with pytest.raises(TopicNotFound):
            build_index(store)

    def test_missing_pages_dir(self, tmp_path):
        with pytest.raises(TopicReadError):
            build_index(TopicStore(tmp_path))


class TestIndexCache:
    def test_builds_once(self):
        build = MagicMock(return_value=[Topic(name="a"), Topic(name="b")])
        cache = IndexCache(build)
        assert not cache.built

        first = cache.get()
        second = cache.get()

        build.assert_called_once_with()
        assert cache.built
        assert first == second
        assert [topic.name for topic in first] == ["a", "b"]

    def test_returned_list_does_not_alter_cache(self):
        cache = IndexCache(lambda: [Topic(name="a")])
        cache.get().clear()
        assert [topic.name for topic in cache.get()] == ["a"]

    def test_failed_build_not_cached(self):
        build = MagicMock(side_effect=[TopicNotFound("a"), [Topic(name="a")]])
        cache = IndexCache(build)

        with pytest.raises(TopicNotFound):
            cache.get()
        assert not cache.built

        assert [topic.name for topic in cache.get()] == ["a"]
        assert build.call_count == 2

    def test_first_build_kept(self):
        cache = IndexCache(MagicMock())

        def concurrent_build():
            # another caller stores its result while this one is building
            cache._index = (Topic(name="first"),)
            return [Topic(name="second")]

        cache._build = concurrent_build
        assert [topic.name for topic in cache.get()] == ["first"]

    def test_stale_after_build(self, store: TopicStore, content_root: ContentRoot):
        content_root.add_topic("accounts")
        cache = IndexCache.for_store(store)
        assert [topic.name for topic in cache.get()] == ["accounts"]

        content_root.add_topic("widgets")

        assert [topic.name for topic in cache.get()] == ["accounts"]
        # single topics are still read fresh
        assert store.hydrate("widgets").title == "Widgets"
