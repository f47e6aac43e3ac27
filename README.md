# local-agent

A small command-line assistant that chats with a model served by a locally
running Ollama server. While it answers, the model can call these tools:

- **read_file**: return the contents of a non-empty regular file
- **list_files**: list the entries of a directory, with a trailing `/` on
  subdirectories
- **edit_file**: replace every occurrence of `old_str` with `new_str` in a
  file; if the file does not exist it is created (with any missing parent
  directories) holding `new_str`
- **markdown_to_html**: render Markdown as HTML (CommonMark plus tables and
  strikethrough; raw HTML in the input is not passed through)
- **website_scraper**: fetch a web page and return its content as Markdown
- **ddg_searcher**: search DuckDuckGo's HTML interface and return the results
  as a JSON list of objects with `title`, `link` and `snippet`

## Installation

```
pip install .
```

You need an Ollama server listening on `http://127.0.0.1:11434`, with the
model you want to use already pulled.

## Usage

```
local-agent
```

Options:

- `-m`, `--model-name`: the model to chat with (default `cogito:14b`)
- `-c`, `--ctx-size`: context window size, sent to the model as the
  `num_ctx` option (default `20000`)
- `-d`, `--debug`: print each message sent, each tool call and each tool
  result to standard error
- `-V`, `--version`: print the version and exit

Type your request at the `You: >` prompt. The assistant's answer is printed
after `Assistant: >`. Type `exit` (in any case), or end the input, to finish
the conversation. If a request to the server fails, the error is printed to
standard error and you can try again.

When the model calls a tool that fails, the error message is handed back to
the model as the tool's result rather than ending the conversation.

## Using the package from Python

Each tool is a subclass of `local_agent.tool.Tool` and can be used on its own:

```python
from local_agent.edit_file import EditFile
from local_agent.read_file import FileReader

EditFile().run(path="notes/todo.txt", old_str="", new_str="buy milk\n")
print(FileReader().run(path="notes/todo.txt"))
```

`run` raises `local_agent.tool.ToolError` when a tool cannot do what was
asked, for example when `old_str` is not found in the file being edited; file
system errors may also come through as `OSError`. `Tool.invoke` takes the
arguments as a mapping or a JSON string, checks that every parameter is
present and is a string, and reports any failure as a `ToolError`.
`Tool.schema()` returns the function description sent to the chat API.

Other pieces you can use directly:

- `local_agent.scraper.html_to_markdown(html)` converts an HTML document to
  Markdown text.
- `local_agent.search_ddg.parse_results(html)` extracts `SearchResult`
  entries from a DuckDuckGo results page; `DDGSearcher.search(query)` fetches
  and parses one.
- `local_agent.coordinator.OllamaClient` posts a conversation to Ollama's
  `/api/chat` endpoint, and `Coordinator` keeps the history and runs tool
  calls until the model gives a reply without any.

## Limitations

- Replies are not streamed; each answer is printed once it is complete.
- The conversation is kept in memory only and is lost when the program ends.
- The Ollama server address is fixed to the local default when using the
  `local-agent` command; pass a different `host` to `OllamaClient` to use
  another one from Python.

## Running the tests

```
pip install .[test]
pytest
```