import json

import pytest

from local_agent.tool import Tool, ToolError


class Echo(Tool):
    name = "echo"
    description = "Echo text back."
    parameters = {"text": "Text to echo.", "suffix": "Text appended."}

    def run(self, text, suffix):
        return text + suffix


class Failing(Tool):
    name = "failing"
    description = "Always fails."
    parameters = {"path": "A path."}

    def run(self, path):
        raise FileNotFoundError(f"missing {path}")


def test_schema_lists_parameters_in_order():
    schema = Tool.schema(Echo())
    assert schema["type"] == "function"
    function = schema["function"]
    assert function["name"] == "echo"
    assert function["description"] == "Echo text back."
    params = function["parameters"]
    assert params["type"] == "object"
    assert params["required"] == ["text", "suffix"]
    assert params["properties"]["text"] == {"type": "string", "description": "Text to echo."}


def test_invoke_with_mapping():
    assert Tool.invoke(Echo(), {"text": "a", "suffix": "b"}) == "ab"


def test_invoke_with_json_string():
    assert Tool.invoke(Echo(), json.dumps({"text": "x", "suffix": "y"})) == "xy"


def test_invoke_ignores_extra_arguments():
    assert Tool.invoke(Echo(), {"text": "a", "suffix": "b", "other": 1}) == "ab"


def test_invoke_missing_argument():
    with pytest.raises(ToolError, match="suffix"):
        Tool.invoke(Echo(), {"text": "a"})


def test_invoke_non_string_argument():
    with pytest.raises(ToolError, match="text"):
        Tool.invoke(Echo(), {"text": 3, "suffix": "b"})


def test_invoke_invalid_json():
    with pytest.raises(ToolError):
        Tool.invoke(Echo(), "{not json")


def test_invoke_non_object_json():
    with pytest.raises(ToolError):
        Tool.invoke(Echo(), "[1, 2]")


def test_invoke_wraps_os_errors():
    with pytest.raises(ToolError, match="missing here"):
        Tool.invoke(Failing(), {"path": "here"})