from types import SimpleNamespace

import pytest
from mcp.types import CreateMessageRequestParams, SamplingMessage, TextContent

from agent import host
from agent.prompt import SAMPLING_SYSTEM_PROMPT
from core.config import Settings


def _completion(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


def _params(**overrides):
    message = SamplingMessage(role="user", content=TextContent(type="text", text="make a user"))
    fields = {"messages": [message], "maxTokens": 1000}
    fields.update(overrides)
    return CreateMessageRequestParams(**fields)


@pytest.mark.asyncio
async def test_sampling_handler_forwards_to_litellm(monkeypatch):
    seen = {}

    async def fake_acompletion(**kwargs):
        seen.update(kwargs)
        return _completion('{"name": "A"}')

    monkeypatch.setattr(host.litellm, "acompletion", fake_acompletion)
    params = _params()

    handler = host.create_sampling_handler("openrouter/openai/gpt-4o-mini")
    text = await handler(params.messages, params, None)

    assert text == '{"name": "A"}'
    assert seen["model"] == "openrouter/openai/gpt-4o-mini"
    assert seen["max_tokens"] == 1000
    assert seen["messages"] == [
        {"role": "system", "content": SAMPLING_SYSTEM_PROMPT},
        {"role": "user", "content": "make a user"},
    ]


@pytest.mark.asyncio
async def test_sampling_handler_prefers_server_system_prompt(monkeypatch):
    seen = {}

    async def fake_acompletion(**kwargs):
        seen.update(kwargs)
        return _completion(None)

    monkeypatch.setattr(host.litellm, "acompletion", fake_acompletion)
    params = _params(systemPrompt="Be terse.")

    text = await host.create_sampling_handler("m")(params.messages, params, None)

    assert text == ""
    assert seen["messages"][0] == {"role": "system", "content": "Be terse."}


def test_create_client_launches_server_module(tmp_path):
    client = host.create_client(Settings(db_path=tmp_path / "users.json"))
    assert client.transport.args == ["-m", "tools.mcp_server"]
