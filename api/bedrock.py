"""
Bedrock Runtime model invocation
"""
import json
import logging
from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .aws import create_client
from .config import get_settings
from .errors import InvocationError
from .models import ModelInvocationPayload

logger = logging.getLogger(__name__)


class BedrockInvoker:
    """Invokes an Anthropic model on Bedrock and returns the generated text"""

    def __init__(self, client=None, model_id: Optional[str] = None):
        settings = get_settings()
        self.model_id = model_id or settings.bedrock_model_id
        self.client = client or create_client("bedrock-runtime", settings.bedrock_endpoint_url)

    def build_payload(self, prompt: Optional[str]) -> ModelInvocationPayload:
        """Single user message; the prompt is embedded as-is"""
        return ModelInvocationPayload.for_prompt(prompt)

    def invoke(self, prompt: Optional[str]) -> str:
        """
        Invoke the model with a prompt
        Raises InvocationError if the call fails or no text comes back
        """
        body = self.build_payload(prompt).to_json()
        logger.info(f"Invoking Bedrock model: {self.model_id}")

        try:
            response = self.client.invoke_model(
                modelId=self.model_id,
                body=body,
                contentType="application/json",
                accept="application/json",
            )
        except (BotoCoreError, ClientError) as e:
            raise InvocationError(f"Bedrock call failed for {self.model_id}: {e}") from e

        try:
            raw = response["body"].read()
        except (BotoCoreError, KeyError) as e:
            raise InvocationError(f"Bedrock response body unreadable: {e}") from e

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise InvocationError(f"Bedrock returned an undecodable body: {e}") from e

        return self._extract_text(data)

    @staticmethod
    def _extract_text(data: Any) -> str:
        """Take the text of the first content block"""
        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, list) or not content:
            raise InvocationError("Bedrock response has no content blocks")

        first: Dict[str, Any] = content[0] if isinstance(content[0], dict) else {}
        text = first.get("text")
        if not isinstance(text, str):
            raise InvocationError("First content block has no text")

        return text


# Global instance
_bedrock_invoker: Optional[BedrockInvoker] = None


def get_bedrock() -> BedrockInvoker:
    """Get the Bedrock invoker instance"""
    global _bedrock_invoker
    if _bedrock_invoker is None:
        _bedrock_invoker = BedrockInvoker()
    return _bedrock_invoker
