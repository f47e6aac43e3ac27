[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "local-agent"
version = "0.1.0"
description = "A command-line assistant that chats with a local Ollama model, which can read, list and edit files, convert Markdown to HTML, fetch web pages as Markdown and search DuckDuckGo."
requires-python = ">=3.10"
keywords = ["ollama", "llm", "agent", "assistant", "tools", "chat", "markdown"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "httpx",
    "beautifulsoup4",
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
local-agent = "local_agent.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["local_agent"]

[tool.pytest.ini_options]
addopts = "-ra"
