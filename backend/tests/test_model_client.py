import io
import json
from types import SimpleNamespace

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, NoCredentialsError

from climateguard.agents.prompts import PromptPayload
from climateguard.exceptions import TransportError
from climateguard.services.model_client import ModelClient, build_request_body

PAYLOAD = PromptPayload(persona="You are an expert.", task="Assess Miami, FL.", temperature=0.7, max_tokens=300)


class _StubBedrock:
    def __init__(self, action):
        self._action = action
        self.requests = []

    def invoke_model(self, **kwargs):
        self.requests.append(kwargs)
        if isinstance(self._action, Exception):
            raise self._action
        return {"body": io.BytesIO(json.dumps(self._action).encode())}


def _client_error(code: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, "InvokeModel")


def test_request_body_puts_persona_in_system():
    body = build_request_body(PAYLOAD)
    assert body["system"] == "You are an expert."
    assert body["messages"] == [{"role": "user", "content": "Assess Miami, FL."}]
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 300
    assert body["anthropic_version"] == "bedrock-2023-05-31"


@pytest.mark.asyncio
async def test_invoke_returns_text():
    bedrock = _StubBedrock({"content": [{"type": "text", "text": '{"flood": {}}'}]})
    client = ModelClient(client=bedrock, model_id="test-model")

    assert await client.invoke(PAYLOAD) == '{"flood": {}}'
    request = bedrock.requests[0]
    assert request["modelId"] == "test-model"
    assert json.loads(request["body"])["max_tokens"] == 300


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, message",
    [
        (NoCredentialsError(), "No AWS credentials"),
        (_client_error("UnrecognizedClientException"), "rejected the configured AWS credentials"),
        (_client_error("ThrottlingException"), "ThrottlingException"),
        (EndpointConnectionError(endpoint_url="https://bedrock.example"), "Could not reach Bedrock"),
    ],
)
async def test_invoke_wraps_service_failures(error, message):
    client = ModelClient(client=_StubBedrock(error))
    with pytest.raises(TransportError, match=message):
        await client.invoke(PAYLOAD)


@pytest.mark.asyncio
async def test_invoke_rejects_unexpected_body():
    client = ModelClient(client=_StubBedrock({"content": []}))
    with pytest.raises(TransportError, match="Unexpected Bedrock response body"):
        await client.invoke(PAYLOAD)


def test_client_is_created_lazily(monkeypatch):
    created = []

    def fake_bedrock_client():
        created.append(True)
        return SimpleNamespace()

    monkeypatch.setattr("climateguard.services.model_client._bedrock_client", fake_bedrock_client)
    client = ModelClient()
    assert created == []
    client.client
    client.client
    assert created == [True]


@pytest.mark.asyncio
@pytest.mark.parametrize("text", [None, 42, {"nested": "object"}])
async def test_invoke_rejects_non_string_text(text):
    client = ModelClient(client=_StubBedrock({"content": [{"type": "text", "text": text}]}))
    with pytest.raises(TransportError, match="Unexpected Bedrock response body"):
        await client.invoke(PAYLOAD)
