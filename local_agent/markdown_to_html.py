"""Tool that renders Markdown as HTML with GitHub-flavoured extensions."""

from __future__ import annotations

from markdown_it import MarkdownIt

from local_agent.tool import Tool, ToolError

_RENDERER = MarkdownIt("commonmark", {"html": False}).enable(["table", "strikethrough"])


class MarkdownToHTML(Tool):
    """Convert Markdown text to HTML."""

    name = "markdown_to_html"
    description = "Convert Markdown to HTML"
    parameters = {"contents": "The Markdown text to be converted to HTML."}

    def run(self, contents: str) -> str:
        if not contents:
            raise ToolError("Cannot convert an empty string to HTML")
        return _RENDERER.render(contents)