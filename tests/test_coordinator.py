import json

import httpx
import pytest

from local_agent.coordinator import Coordinator, OllamaClient
from local_agent.list_files import ListFiles
from local_agent.read_file import FileReader


class ScriptedClient:
    """Returns queued replies and records every request."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls = []

    def chat(self, model, messages, tools, options):
        self.calls.append(
            {"model": model, "messages": [dict(m) for m in messages], "tools": tools, "options": options}
        )
        return self.replies.pop(0)


def _tool_call(name, arguments):
    return {"role": "assistant", "content": "", "tool_calls": [{"function": {"name": name, "arguments": arguments}}]}


def test_plain_reply_is_returned_and_recorded():
    reply = {"role": "assistant", "content": "hello"}
    client = ScriptedClient([reply])
    agent = Coordinator(client, "model-a", [], tools=[], options={"num_ctx": 20000})
    result = agent.chat([{"role": "user", "content": "hi"}])
    assert result == reply
    assert agent.history == [{"role": "user", "content": "hi"}, reply]
    assert client.calls[0]["model"] == "model-a"
    assert client.calls[0]["options"] == {"num_ctx": 20000}


def test_tool_call_result_is_sent_back(tmp_path):
    (tmp_path / "sub").mkdir()
    final = {"role": "assistant", "content": "done"}
    client = ScriptedClient([_tool_call("list_files", {"path": str(tmp_path)}), final])
    agent = Coordinator(client, "m", tools=[ListFiles()])
    result = agent.chat([{"role": "user", "content": "list"}])
    assert result == final
    assert len(client.calls) == 2
    tool_messages = [m for m in agent.history if m["role"] == "tool"]
    assert tool_messages == [{"role": "tool", "content": "sub/\n"}]
    assert client.calls[1]["messages"][-1] == tool_messages[0]


def test_tool_schemas_are_offered():
    client = ScriptedClient([{"role": "assistant", "content": "ok"}])
    agent = Coordinator(client, "m", tools=[ListFiles(), FileReader()])
    agent.chat([{"role": "user", "content": "x"}])
    names = {schema["function"]["name"] for schema in client.calls[0]["tools"]}
    assert names == {"list_files", "read_file"}


def test_tool_failure_is_reported_to_model(tmp_path):
    missing = tmp_path / "missing.txt"
    client = ScriptedClient(
        [_tool_call("read_file", {"path": str(missing)}), {"role": "assistant", "content": "sorry"}]
    )
    agent = Coordinator(client, "m", tools=[FileReader()])
    result = agent.chat([{"role": "user", "content": "read"}])
    assert result["content"] == "sorry"
    assert agent.history[2]["role"] == "tool"
    assert str(missing) in agent.history[2]["content"]


def test_unknown_tool_is_reported_to_model():
    client = ScriptedClient([_tool_call("nope", {}), {"role": "assistant", "content": "ok"}])
    agent = Coordinator(client, "m", tools=[])
    agent.chat([{"role": "user", "content": "x"}])
    assert agent.history[2]["role"] == "tool"
    assert "nope" in agent.history[2]["content"]


def test_history_persists_across_turns():
    client = ScriptedClient([{"role": "assistant", "content": "a"}, {"role": "assistant", "content": "b"}])
    agent = Coordinator(client, "m")
    agent.chat([{"role": "user", "content": "one"}])
    agent.chat([{"role": "user", "content": "two"}])
    assert [m["content"] for m in client.calls[1]["messages"]] == ["one", "a", "two"]


def test_debug_logs_to_stderr(capsys):
    client = ScriptedClient([{"role": "assistant", "content": "a"}])
    Coordinator(client, "m", debug=True).chat([{"role": "user", "content": "ping"}])
    err = capsys.readouterr().err
    assert "ping" in err
    assert "m" in err


def test_ollama_client_posts_chat_request():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"message": {"role": "assistant", "content": "hi"}, "done": True})

    client = OllamaClient("http://ollama.example.com/", httpx.Client(transport=httpx.MockTransport(handler)))
    tools = [ListFiles().schema()]
    message = client.chat("m", [{"role": "user", "content": "x"}], tools, {"num_ctx": 20000})
    assert message == {"role": "assistant", "content": "hi"}
    assert seen[0].url.path == "/api/chat"
    payload = json.loads(seen[0].content)
    assert payload["stream"] is False
    assert payload["model"] == "m"
    assert payload["options"] == {"num_ctx": 20000}
    assert payload["tools"] == tools


def test_ollama_client_error_status_raises():
    def handler(request):
        return httpx.Response(404, json={"error": "model not found"})

    client = OllamaClient(client=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(RuntimeError, match="model not found"):
        client.chat("m", [], [], None)


def test_ollama_client_missing_message_raises():
    client = OllamaClient(client=httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={}))))
    with pytest.raises(ValueError):
        client.chat("m", [], [], None)