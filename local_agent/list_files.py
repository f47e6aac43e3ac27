"""Tool that lists the entries of a directory."""

from __future__ import annotations

import os

from local_agent.tool import Tool, ToolError


class ListFiles(Tool):
    """List files and directories, marking directories with a trailing slash."""

    name = "list_files"
    description = (
        "List files and directories at a given path. If no path is provided, "
        "lists files and directories in the current directory."
    )
    parameters = {
        "path": (
            "The relative path to list files from. "
            "Defaults to current directory if not provided."
        ),
    }

    def run(self, path: str) -> str:
        if not os.path.isdir(path):
            raise ToolError(
                f"The provide path {path} is not a directory, "
                "only directories can have their contents listed."
            )
        with os.scandir(path) as entries:
            return "".join(
                f"{entry.name}/\n" if entry.is_dir() else f"{entry.name}\n"
                for entry in entries
            )