"""Tool that searches the web through DuckDuckGo's HTML interface."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass

import httpx
from bs4 import BeautifulSoup

from local_agent.tool import Tool, ToolError

DEFAULT_BASE_URL = "https://duckduckgo.com"


@dataclass(frozen=True)
class SearchResult:
    """One entry of a search results page."""

    title: str
    link: str
    snippet: str


def _field_text(result, selector: str) -> str:
    element = result.select_one(selector)
    if element is None:
        raise ValueError(f"Search result is missing an element matching '{selector}'.")
    return element.get_text()


def parse_results(html: str) -> list[SearchResult]:
    """Extract the results listed on a DuckDuckGo HTML results page."""
    document = BeautifulSoup(html, "html.parser")
    return [
        SearchResult(
            title=_field_text(result, ".result__a"),
            link=_field_text(result, ".result__url").strip(),
            snippet=_field_text(result, ".result__snippet"),
        )
        for result in document.select(".web-result")
    ]


class DDGSearcher(Tool):
    """Search DuckDuckGo and report the results as JSON."""

    name = "ddg_searcher"
    description = "Searches the web using DuckDuckGo's HTML interface."
    parameters = {"query": "The search query to send to DuckDuckGo"}

    def __init__(
        self, client: httpx.Client | None = None, base_url: str = DEFAULT_BASE_URL
    ) -> None:
        self.client = client if client is not None else httpx.Client(follow_redirects=True)
        self.base_url = base_url

    def search(self, query: str) -> list[SearchResult]:
        """Run a query and return the parsed results."""
        try:
            response = self.client.get(f"{self.base_url}/html/?q={query}")
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ToolError(str(exc)) from exc
        return parse_results(response.text)

    def run(self, query: str) -> str:
        results = self.search(query)
        return json.dumps(
            [asdict(result) for result in results], ensure_ascii=False, separators=(",", ":")
        )