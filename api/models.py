"""
Data classes for requests, responses and Bedrock payloads
"""
import json
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from api.errors import RequestValidationError

ANTHROPIC_VERSION = "bedrock-2023-05-31"
MAX_OUTPUT_TOKENS = 1000

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

# Column name -> str | int | float | bool | None
QueryRow = Dict[str, Any]
QueryResult = List[QueryRow]


@dataclass(frozen=True)
class InboundRequest:
    """Normalized API Gateway request"""
    http_method: str
    path: str
    body: Optional[str] = None
    query_parameters: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class OutboundResponse:
    """Lambda proxy response; body is already JSON encoded"""
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


@dataclass
class Message:
    role: str
    content: Optional[str]


@dataclass
class ModelInvocationPayload:
    """Anthropic messages body for Bedrock InvokeModel"""
    messages: List[Message]
    anthropic_version: str = ANTHROPIC_VERSION
    max_tokens: int = MAX_OUTPUT_TOKENS

    @classmethod
    def for_prompt(cls, prompt: Optional[str]) -> "ModelInvocationPayload":
        return cls(messages=[Message(role="user", content=prompt)])

    def to_json(self) -> str:
        return json.dumps(asdict(self))


@dataclass(frozen=True)
class PromptRequest:
    """Body of POST /api/bedrock"""
    prompt: str

    @classmethod
    def from_body(cls, raw: Optional[str]) -> "PromptRequest":
        """
        Decode the request body.
        Malformed JSON raises json.JSONDecodeError; a missing or
        non-string prompt raises RequestValidationError.
        """
        data = json.loads(raw) if raw else {}
        if not isinstance(data, dict):
            raise RequestValidationError("Missing or invalid prompt")

        prompt = data.get("prompt")
        if not isinstance(prompt, str):
            raise RequestValidationError("Missing or invalid prompt")

        return cls(prompt=prompt)
