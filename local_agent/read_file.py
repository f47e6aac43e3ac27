"""Tool that returns the contents of a text file."""

from __future__ import annotations

import os
import stat

from local_agent.tool import Tool, ToolError


class FileReader(Tool):
    """Read a non-empty regular file and return its text."""

    name = "read_file"
    description = (
        "Read and return the contents of a file at the given path only when the contents "
        "of a file is needed. The given path must not be a directory."
    )
    parameters = {"path": "The relative path to a file to be read."}

    def run(self, path: str) -> str:
        if not stat.S_ISREG(os.stat(path).st_mode):
            raise ToolError(f"Path {path} is not a file.")
        with open(path, encoding="utf-8", newline="") as reader:
            contents = reader.read()
        if not contents:
            raise ToolError(f"File at path {path} is empty.")
        return contents