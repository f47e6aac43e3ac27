"""Base class for tools the assistant model can call."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar


class ToolError(Exception):
    """Raised when a tool cannot complete its work."""


class Tool(ABC):
    """A named action with string parameters, described to the model by a JSON schema."""

    name: ClassVar[str]
    description: ClassVar[str]
    parameters: ClassVar[Mapping[str, str]] = {}

    def schema(self) -> dict[str, Any]:
        """Return the function description sent to the chat API."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {
                        param: {"type": "string", "description": text}
                        for param, text in self.parameters.items()
                    },
                    "required": list(self.parameters),
                },
            },
        }

    def invoke(self, arguments: Mapping[str, Any] | str | bytes) -> str:
        """Validate model-supplied arguments and run the tool.

        Any failure is reported as a ToolError.
        """
        if isinstance(arguments, (str, bytes)):
            try:
                arguments = json.loads(arguments)
            except json.JSONDecodeError as exc:
                raise ToolError(f"Invalid arguments for tool {self.name}: {exc}") from exc
        if not isinstance(arguments, Mapping):
            raise ToolError(f"Arguments for tool {self.name} must be an object.")

        kwargs: dict[str, str] = {}
        for param in self.parameters:
            if param not in arguments:
                raise ToolError(f"Missing argument '{param}' for tool {self.name}.")
            value = arguments[param]
            if not isinstance(value, str):
                raise ToolError(f"Argument '{param}' for tool {self.name} must be a string.")
            kwargs[param] = value

        try:
            return self.run(**kwargs)
        except ToolError:
            raise
        except (OSError, ValueError) as exc:
            raise ToolError(str(exc)) from exc

    @abstractmethod
    def run(self, **kwargs: str) -> str:
        """Perform the tool's action and return its textual result."""