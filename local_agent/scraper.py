"""Tool that downloads a web page and returns its content as Markdown."""

from __future__ import annotations

import re

import httpx
from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from local_agent.tool import Tool, ToolError

_SKIPPED_TAGS = frozenset(
    {"script", "style", "head", "noscript", "template", "iframe", "svg", "object"}
)
_BLOCK_TAGS = frozenset(
    {
        "p", "div", "section", "article", "header", "footer", "main", "nav",
        "aside", "table", "thead", "tbody", "tfoot", "tr", "form", "figure",
        "figcaption", "dl", "dt", "dd", "address", "details", "summary",
    }
)
_IGNORED_STRINGS = (Comment, Doctype, Declaration, ProcessingInstruction, CData)
_HEADINGS = {f"h{level}": level for level in range(1, 7)}


def _collapse_blank_lines(text: str) -> str:
    return re.sub(r"\n{3,}", "\n\n", text)


def _wrap(inner: str, mark: str) -> str:
    """Surround the non-blank core of ``inner`` with ``mark``, keeping outer spaces."""
    core = inner.strip()
    if not core:
        return inner
    leading = inner[: len(inner) - len(inner.lstrip())]
    trailing = inner[len(inner.rstrip()):]
    return f"{leading}{mark}{core}{mark}{trailing}"


def _block(text: str) -> str:
    return f"\n\n{text.strip()}\n\n"


def _render_children(node: Tag) -> str:
    return "".join(_render(child) for child in node.children)


def _render_list(node: Tag, ordered: bool) -> str:
    items = []
    for index, item in enumerate(node.find_all("li", recursive=False), start=1):
        marker = f"{index}. " if ordered else "- "
        pad = " " * len(marker)
        first, *rest = _collapse_blank_lines(_render_children(item).strip()).split("\n")
        continuation = "".join(f"\n{pad}{line}" if line.strip() else "\n" for line in rest)
        items.append(f"{marker}{first}{continuation}")
    if not items:
        return ""
    return "\n\n" + "\n".join(items) + "\n\n"


def _render_quote(node: Tag) -> str:
    inner = _collapse_blank_lines(_render_children(node).strip())
    quoted = "\n".join(f"> {line}" if line else ">" for line in inner.split("\n"))
    return f"\n\n{quoted}\n\n"


def _render_tag(node: Tag) -> str:
    name = node.name
    if name in _SKIPPED_TAGS:
        return ""
    if name in _HEADINGS:
        return f"\n\n{'#' * _HEADINGS[name]} {_render_children(node).strip()}\n\n"
    if name in _BLOCK_TAGS:
        return _block(_render_children(node))
    if name == "br":
        return "\n"
    if name == "hr":
        return "\n\n---\n\n"
    if name == "pre":
        return f"\n\n```\n{node.get_text().strip(chr(10))}\n```\n\n"
    if name == "code":
        return f"`{node.get_text()}`"
    if name in ("strong", "b"):
        return _wrap(_render_children(node), "**")
    if name in ("em", "i"):
        return _wrap(_render_children(node), "*")
    if name in ("del", "s", "strike"):
        return _wrap(_render_children(node), "~~")
    if name == "a":
        text = _render_children(node).strip()
        href = node.get("href")
        if not href:
            return text
        return f"[{text or href}]({href})"
    if name == "img":
        src = node.get("src")
        return f"![{node.get('alt', '')}]({src})" if src else ""
    if name == "ul":
        return _render_list(node, ordered=False)
    if name == "ol":
        return _render_list(node, ordered=True)
    if name == "li":
        return f"\n- {_render_children(node).strip()}\n"
    if name == "blockquote":
        return _render_quote(node)
    if name in ("td", "th"):
        return f"{_render_children(node).strip()} "
    return _render_children(node)


def _render(node) -> str:
    if isinstance(node, _IGNORED_STRINGS):
        return ""
    if isinstance(node, NavigableString):
        return re.sub(r"\s+", " ", str(node))
    if isinstance(node, Tag):
        return _render_tag(node)
    return ""


def html_to_markdown(html: str) -> str:
    """Convert an HTML document to Markdown text."""
    soup = BeautifulSoup(html, "html.parser")
    text = _render_children(soup)
    lines = (line.rstrip() for line in text.split("\n"))
    return _collapse_blank_lines("\n".join(lines)).strip()


class Scraper(Tool):
    """Fetch a web page and return its text as Markdown."""

    name = "website_scraper"
    description = "Scrapes text content from websites and splits it into manageable chunks."
    parameters = {"website": "The URL of the website to scrape"}

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client if client is not None else httpx.Client(follow_redirects=True)

    def run(self, website: str) -> str:
        try:
            response = self._client.get(website)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ToolError(str(exc)) from exc
        return html_to_markdown(response.text)