"""
Shared fixtures: fake AWS clients and a clean settings cache
"""
import io
import json
import os
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("BEDROCK_MODEL_ID", "anthropic.claude-test")
os.environ.setdefault("DB_CLUSTER_ARN", "arn:aws:rds:us-east-1:123456789012:cluster:test")
os.environ.setdefault("DB_SECRET_ARN", "arn:aws:secretsmanager:us-east-1:123456789012:secret:test")

from api.bedrock import BedrockInvoker
from api.config import get_settings
from api.database import DataApiManager


CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


def client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


def bedrock_body(payload) -> dict:
    """InvokeModel response with a readable body stream"""
    raw = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
    return {"body": io.BytesIO(raw), "contentType": "application/json"}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def bedrock_client():
    client = MagicMock()
    client.invoke_model.return_value = bedrock_body(
        {"content": [{"type": "text", "text": "hello"}], "stop_reason": "end_turn"}
    )
    return client


@pytest.fixture
def rds_client():
    client = MagicMock()
    client.execute_statement.return_value = {
        "columnMetadata": [{"name": "id"}, {"name": "name"}],
        "records": [[{"longValue": 1}, {"stringValue": "a"}]],
        "numberOfRecordsUpdated": 0,
    }
    return client


@pytest.fixture
def invoker(bedrock_client):
    return BedrockInvoker(client=bedrock_client, model_id="anthropic.claude-test")


@pytest.fixture
def db(rds_client):
    return DataApiManager(
        client=rds_client,
        cluster_arn="arn:cluster",
        secret_arn="arn:secret",
    )
