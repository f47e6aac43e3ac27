"""Interactive command-line chat with the local assistant."""

from __future__ import annotations

import argparse
import sys

import httpx

from local_agent.coordinator import Coordinator, OllamaClient
from local_agent.edit_file import EditFile
from local_agent.list_files import ListFiles
from local_agent.markdown_to_html import MarkdownToHTML
from local_agent.read_file import FileReader
from local_agent.scraper import Scraper
from local_agent.search_ddg import DDGSearcher

EXIT_COMMAND = "exit"
DEFAULT_MODEL = "cogito:14b"
DEFAULT_CTX_SIZE = 20000

WELCOME = (
    "\nWelcome to your Local AI Agent!\n"
    "I can perform many tasks for you like:\n"
    "\tRead Files\n"
    "\tList Files in a directory\n"
    "\tEdit/Create Files\n"
    "\tConvert Markdown to HTML\n"
    "\tSearch The Web to help provide answers.\n"
    "When you want to end your conversation, just type exit\n"
    "Are you ready to begin?"
)
USER_PROMPT = "\n\x1b[34mYou: >\x1b[0m "
ASSISTANT_PREFIX = "\n\x1b[33mAssistant: >\x1b[0m "


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="local-agent",
        description=(
            "An AI assistant that uses a local Ollama model to work with files, "
            "convert Markdown and search the web."
        ),
    )
    parser.add_argument("-m", "--model-name", default=DEFAULT_MODEL)
    parser.add_argument("-d", "--debug", action="store_true")
    parser.add_argument("-c", "--ctx-size", type=int, default=DEFAULT_CTX_SIZE)
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the interactive chat until the user types exit."""
    args = build_parser().parse_args(argv)
    agent = Coordinator(
        OllamaClient(),
        args.model_name,
        [],
        tools=[
            FileReader(),
            ListFiles(),
            EditFile(),
            MarkdownToHTML(),
            Scraper(),
            DDGSearcher(),
        ],
        options={"num_ctx": args.ctx_size},
        debug=args.debug,
    )
    out = sys.stdout
    while True:
        out.write(WELCOME)
        out.write(USER_PROMPT)
        out.flush()

        line = sys.stdin.readline()
        if not line or line.strip().lower() == EXIT_COMMAND:
            out.write("\nGoodbye.\n")
            out.flush()
            return 0

        try:
            reply = agent.chat([{"role": "user", "content": line}])
        except (httpx.HTTPError, RuntimeError, ValueError) as exc:
            print(f"Error during chat: {exc}", file=sys.stderr)
            continue
        out.write(f"{ASSISTANT_PREFIX}{reply.get('content', '')}")
        out.flush()


if __name__ == "__main__":
    sys.exit(main())