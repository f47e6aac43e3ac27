"""Tool that edits a text file by replacing text, creating the file if needed."""

from __future__ import annotations

import os

from local_agent.tool import Tool, ToolError


def create_file(path: str, contents: str) -> str:
    """Create (or truncate) the file at ``path`` and write ``contents`` to it."""
    try:
        handle = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise ToolError(f"Failed to create file at {path}, Reason: {exc}") from exc
    with handle:
        try:
            handle.write(contents)
        except OSError as exc:
            raise ToolError(f"Failed to write to file at {path}, Reason: {exc}") from exc
        try:
            handle.flush()
        except OSError as exc:
            raise ToolError(
                f"Failed to flush contents to file at {path}, Reason: {exc}"
            ) from exc
    return f"Successfully created file at {path}"


class EditFile(Tool):
    """Replace every occurrence of one string with another in a file."""

    name = "edit_file"
    description = (
        "Make edits to a text file. Replaces 'old_str' with 'new_str' in the given file.\n"
        "'old_str' and 'new_str' Must be different from each other.\n"
        "If the file specified doesn't exist, it will be created."
    )
    parameters = {
        "path": "The path to the file.",
        "old_str": "Text to search for - must match eactly and must have only one match exactly.",
        "new_str": "Text to replace old_str with.",
    }

    def run(self, path: str, old_str: str, new_str: str) -> str:
        if not path or old_str == new_str:
            raise ToolError("Could not edit a file, input parameters were invalid.")

        if not os.path.lexists(path):
            parent = os.path.dirname(path)
            if parent:
                try:
                    os.makedirs(parent, exist_ok=True)
                except OSError as exc:
                    raise ToolError(
                        "Failed to create required directory structure for new file. "
                        f"Reason: {exc}"
                    ) from exc
            return create_file(path, new_str)

        with open(path, encoding="utf-8", newline="") as reader:
            contents = reader.read()

        new_contents = contents.replace(old_str, new_str)
        if contents == new_contents and old_str:
            raise ToolError("old_str was not found in the file.")

        try:
            with open(path, "w", encoding="utf-8", newline="") as writer:
                writer.write(new_contents)
        except OSError as exc:
            raise ToolError(f"Failed to edit file at {path}, reason: {exc}") from exc
        return "OK"