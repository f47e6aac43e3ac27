"""Chat loop that lets a model served by Ollama call local tools."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import httpx

from local_agent.tool import Tool, ToolError

DEFAULT_HOST = "http://127.0.0.1:11434"


def _error_text(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        detail = data["error"]
    else:
        detail = response.text
    return f"Ollama returned status {response.status_code}: {detail}"


class OllamaClient:
    """Minimal client for Ollama's non-streaming chat endpoint."""

    def __init__(self, host: str = DEFAULT_HOST, client: httpx.Client | None = None) -> None:
        self.host = host.rstrip("/")
        self._client = client if client is not None else httpx.Client(timeout=None)

    def chat(
        self,
        model: str,
        messages: Sequence[Mapping[str, Any]],
        tools: Sequence[Mapping[str, Any]] = (),
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send the conversation and return the assistant's reply message."""
        payload: dict[str, Any] = {
            "model": model,
            "messages": [dict(message) for message in messages],
            "stream": False,
        }
        if tools:
            payload["tools"] = list(tools)
        if options:
            payload["options"] = dict(options)

        response = self._client.post(f"{self.host}/api/chat", json=payload)
        if response.is_error:
            raise RuntimeError(_error_text(response))
        try:
            data = response.json()
        except ValueError as exc:
            raise ValueError("Ollama returned a response that is not JSON.") from exc
        message = data.get("message") if isinstance(data, dict) else None
        if not isinstance(message, dict):
            raise ValueError("Ollama response has no message.")
        return message


class Coordinator:
    """Keeps the conversation history and runs tool calls until the model answers."""

    def __init__(
        self,
        client: OllamaClient,
        model: str,
        history: list[dict[str, Any]] | None = None,
        tools: Iterable[Tool] = (),
        options: Mapping[str, Any] | None = None,
        debug: bool = False,
    ) -> None:
        self.client = client
        self.model = model
        self.history = [] if history is None else history
        self.tools = {tool.name: tool for tool in tools}
        self.options = dict(options or {})
        self.debug = debug

    def _log(self, text: str) -> None:
        if self.debug:
            print(text, file=sys.stderr)

    def _call_tool(self, call: Mapping[str, Any]) -> str:
        function = call.get("function") or {}
        name = function.get("name", "")
        arguments = function.get("arguments") or {}
        self._log(f"Tool call: {name}({arguments})")
        tool = self.tools.get(name)
        if tool is None:
            result = f"Tool {name} is not available."
        else:
            try:
                result = tool.invoke(arguments)
            except ToolError as exc:
                result = str(exc)
        self._log(f"Tool response: {result}")
        return result

    def chat(self, messages: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Add ``messages`` to the conversation and return the model's final reply."""
        schemas = [tool.schema() for tool in self.tools.values()]
        pending = [dict(message) for message in messages]
        while True:
            for message in pending:
                self._log(f"Hit {self.model} with:\n\t{message.get('role')}: '{message.get('content')}'")
            self.history.extend(pending)
            reply = self.client.chat(self.model, self.history, schemas, self.options)
            self.history.append(reply)
            calls = reply.get("tool_calls") or []
            if not calls:
                return reply
            pending = [{"role": "tool", "content": self._call_tool(call)} for call in calls]