# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

"""
Markdown rendering for topic bodies.

Link targets are rewritten through a plain `(node_kind, target) -> target`
function, applied by a tree processor. The function knows nothing about the
markdown library, so it can be reused with any engine that can visit image
nodes.
"""

from typing import Callable, Iterable
from xml.etree.ElementTree import Element

import markdown

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor


TargetRewriter = Callable[[str, str], str]

# node kinds passed to rewriters, and the attribute holding their target
IMAGE = "img"
LINK = "a"
TARGET_ATTRIBUTES = {IMAGE: "src", LINK: "href"}

DEFAULT_EXTENSIONS = ("extra", "sane_lists", "toc")


def image_url_prefixer(slug: str) -> TargetRewriter:
    """Resolve `./`-relative image targets against the topic's own folder."""

    def rewrite(kind: str, target: str) -> str:
        if kind != IMAGE or not target.startswith("./"):
            return target
        return f"{slug}/{target.removeprefix('./')}"

    return rewrite


class TargetRewriteProcessor(Treeprocessor):
    """Apply a rewriter to the target of every image and link element."""

    def __init__(self, md: markdown.Markdown, rewriter: TargetRewriter):
        super().__init__(md)
        self.rewriter = rewriter

    def run(self, root: Element) -> None:
        for kind, attribute in TARGET_ATTRIBUTES.items():
            for element in root.iter(kind):
                target = element.get(attribute)
                if target is None:
                    continue
                rewritten = self.rewriter(kind, target)
                if rewritten != target:
                    element.set(attribute, rewritten)


class TargetRewriteExtension(Extension):
    def __init__(self, rewriter: TargetRewriter, **kwargs):
        self.rewriter = rewriter
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # must run after the "inline" processor (priority 20) has created elements
        md.treeprocessors.register(
            TargetRewriteProcessor(md, self.rewriter), "target_rewrite", 15
        )


class MarkdownRenderer:
    """Render topic bodies to HTML fragments."""

    def __init__(self, extensions: Iterable[str | Extension] = DEFAULT_EXTENSIONS):
        self.extensions = list(extensions)

    def render(self, body: str, slug: str) -> str:
        """Convert markdown to HTML, scoping relative images to the topic folder."""
        # Markdown instances carry per-document state, use a fresh one each time
        md = markdown.Markdown(
            extensions=[*self.extensions, TargetRewriteExtension(image_url_prefixer(slug))]
        )
        return md.convert(body)


def render(body: str, slug: str) -> str:
    return MarkdownRenderer().render(body, slug)
