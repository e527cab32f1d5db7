"""
ModelClient
===========
Thin wrapper around AWS Bedrock (Anthropic messages API) that takes a
PromptPayload and returns the model's reply as plain text.

Every way the call can go wrong before we have text in hand — no credentials,
rejected credentials, throttling, network failure, an unexpected body — is
raised as TransportError. What the text says is the parser's problem.
"""

import asyncio
import json

import boto3
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError

from climateguard.agents.prompts import PromptPayload
from climateguard.config.settings import settings
from climateguard.exceptions import TransportError

_AUTH_ERROR_CODES = {
    "AccessDeniedException",
    "UnrecognizedClientException",
    "InvalidSignatureException",
    "ExpiredTokenException",
}


def _bedrock_client():
    return boto3.client(
        "bedrock-runtime",
        region_name=settings.AWS_REGION,
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
    )


def build_request_body(payload: PromptPayload) -> dict:
    """Bedrock's Anthropic body carries the system message outside `messages`."""
    return {
        "anthropic_version": settings.BEDROCK_ANTHROPIC_VERSION,
        "max_tokens": payload.max_tokens,
        "temperature": payload.temperature,
        "system": payload.persona,
        "messages": [{"role": "user", "content": payload.task}],
    }


class ModelClient:
    def __init__(self, client=None, model_id: str | None = None):
        self._client = client
        self.model_id = model_id or settings.BEDROCK_MODEL_ID

    @property
    def client(self):
        if self._client is None:
            self._client = _bedrock_client()
        return self._client

    def _invoke_sync(self, payload: PromptPayload) -> str:
        try:
            response = self.client.invoke_model(
                modelId=self.model_id,
                body=json.dumps(build_request_body(payload)),
                contentType="application/json",
                accept="application/json",
            )
        except NoCredentialsError as e:
            raise TransportError(
                "No AWS credentials found. Set AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY."
            ) from e
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            if code in _AUTH_ERROR_CODES:
                raise TransportError(f"Bedrock rejected the configured AWS credentials ({code}).") from e
            raise TransportError(f"Bedrock request failed ({code}): {e}") from e
        except BotoCoreError as e:
            raise TransportError(f"Could not reach Bedrock: {e}") from e

        try:
            body = json.loads(response["body"].read())
            text = body["content"][0]["text"]
            if not isinstance(text, str):
                raise TypeError(f"content[0].text is {type(text).__name__}, not str")
            return text
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise TransportError(f"Unexpected Bedrock response body: {e}") from e

    async def invoke(self, payload: PromptPayload) -> str:
        print(f"[ModelClient] Tool: AWS Bedrock invoke_model ({self.model_id})")
        print(f"[ModelClient]   temperature={payload.temperature} max_tokens={payload.max_tokens}")
        text = await asyncio.to_thread(self._invoke_sync, payload)
        print(f"[ModelClient] Tool response (raw): {text[:400]}{'...' if len(text) > 400 else ''}")
        return text
