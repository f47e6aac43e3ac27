"""A command-line chat assistant backed by Ollama, with file, Markdown and web tools."""

__version__ = "0.1.0"