"""
Tests for the Bedrock model invoker
"""
import json

import pytest
from botocore.exceptions import EndpointConnectionError

from api.errors import InvocationError
from tests.conftest import bedrock_body, client_error


class TestBuildPayload:

    def test_payload_shape(self, invoker):
        payload = json.loads(invoker.build_payload("hi").to_json())

        assert payload == {
            "anthropic_version": "bedrock-2023-05-31",
            "max_tokens": 1000,
            "messages": [{"role": "user", "content": "hi"}],
        }

    def test_none_prompt_is_embedded_as_is(self, invoker):
        payload = json.loads(invoker.build_payload(None).to_json())
        assert payload["messages"] == [{"role": "user", "content": None}]


class TestInvoke:

    def test_returns_first_block_text(self, invoker, bedrock_client):
        assert invoker.invoke("hi") == "hello"

        kwargs = bedrock_client.invoke_model.call_args.kwargs
        assert kwargs["modelId"] == "anthropic.claude-test"
        assert kwargs["contentType"] == "application/json"
        assert json.loads(kwargs["body"])["messages"][0]["content"] == "hi"

    def test_only_first_block_is_used(self, invoker, bedrock_client):
        bedrock_client.invoke_model.return_value = bedrock_body(
            {"content": [{"type": "text", "text": "one"}, {"type": "text", "text": "two"}]}
        )
        assert invoker.invoke("hi") == "one"

    def test_client_error_is_wrapped(self, invoker, bedrock_client):
        cause = client_error("ThrottlingException", "InvokeModel")
        bedrock_client.invoke_model.side_effect = cause

        with pytest.raises(InvocationError) as exc_info:
            invoker.invoke("hi")

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.to_body() == {"error": "Failed to invoke model"}

    def test_transport_error_is_wrapped(self, invoker, bedrock_client):
        bedrock_client.invoke_model.side_effect = EndpointConnectionError(endpoint_url="https://bedrock")

        with pytest.raises(InvocationError):
            invoker.invoke("hi")

    @pytest.mark.parametrize("payload", [
        {"content": []},
        {"stop_reason": "end_turn"},
        {"content": [{"type": "tool_use", "id": "x"}]},
        ["not", "an", "object"],
    ])
    def test_missing_text_is_a_failure(self, invoker, bedrock_client, payload):
        bedrock_client.invoke_model.return_value = bedrock_body(payload)

        with pytest.raises(InvocationError):
            invoker.invoke("hi")

    def test_undecodable_body(self, invoker, bedrock_client):
        bedrock_client.invoke_model.return_value = bedrock_body(b"<html>oops</html>")

        with pytest.raises(InvocationError) as exc_info:
            invoker.invoke("hi")

        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_empty_text_is_returned(self, invoker, bedrock_client):
        bedrock_client.invoke_model.return_value = bedrock_body({"content": [{"type": "text", "text": ""}]})
        assert invoker.invoke("hi") == ""
