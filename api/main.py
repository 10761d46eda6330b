"""
Lambda Handler and Request Router
"""
import base64
import json
import logging
from typing import Any, Dict, Optional

from api.config import get_settings
from api.bedrock import BedrockInvoker, get_bedrock
from api.database import DataApiManager, get_db
from api.errors import RouteNotFound
from api.models import CORS_HEADERS, InboundRequest, OutboundResponse
from api.routes.bedrock import invoke_model
from api.routes.data import query_data

def configure_logging() -> None:
    """Apply LOG_LEVEL; the Lambda runtime installs its root handler before import"""
    level = get_settings().log_level
    logging.basicConfig(level=level)
    logging.getLogger().setLevel(level)


# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


# ============================================================
# RESPONSE HELPERS
# ============================================================

def json_response(status_code: int, body: Any) -> OutboundResponse:
    """Create a JSON response with CORS headers"""
    return OutboundResponse(
        status_code=status_code,
        body=json.dumps(body),
        headers=dict(CORS_HEADERS),
    )


def error_response(status_code: int, message: str) -> OutboundResponse:
    """Create an error response"""
    return json_response(status_code, {"error": message})


def internal_error_response(exc: Exception) -> OutboundResponse:
    """500 for failures nothing else handled"""
    body = {"error": "Internal server error"}
    if get_settings().expose_error_details:
        body["message"] = str(exc)
    return json_response(500, body)


# ============================================================
# EVENT PARSING
# ============================================================

def parse_event(event: Dict) -> InboundRequest:
    """
    Build an InboundRequest from an API Gateway event
    Supports both HTTP API (v2) and REST API (v1) event formats
    """
    http_context = event.get("requestContext", {}).get("http", {})

    method = event.get("httpMethod") or http_context.get("method", "")

    path = (
        event.get("path") or
        event.get("rawPath") or
        http_context.get("path", "")
    )

    # Strip stage prefix (e.g. /prod) when the gateway leaves it in
    stage = get_settings().stage_name
    if stage:
        prefix = f"/{stage.strip('/')}"
        if path == prefix:
            path = "/"
        elif path.startswith(prefix + "/"):
            path = path[len(prefix):]

    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")

    return InboundRequest(
        http_method=method,
        path=path,
        body=body,
        query_parameters=dict(event.get("queryStringParameters") or {}),
        headers=dict(event.get("headers") or {}),
    )


# ============================================================
# ROUTING
# ============================================================

def route_request(request: InboundRequest,
                  bedrock: Optional[BedrockInvoker] = None,
                  db: Optional[DataApiManager] = None) -> OutboundResponse:
    """
    Route the request to the matching handler
    Never raises; every failure becomes a JSON error response
    """
    method, path = request.http_method, request.path
    logger.info(f"Received request: {method} {path}")

    try:
        # ========== MODEL INVOCATION ==========
        if path == "/api/bedrock" and method == "POST":
            status, result = invoke_model(request, bedrock or get_bedrock())
            return json_response(status, result)

        # ========== DATA QUERY ==========
        if path == "/api/data" and method == "GET":
            status, result = query_data(request, db or get_db())
            return json_response(status, result)

        # ========== 404 ==========
        raise RouteNotFound(f"No route for {method} {path}")

    except RouteNotFound as e:
        logger.info(str(e))
        return json_response(e.status_code, e.to_body())

    except Exception as e:
        logger.exception("Error processing request")
        return internal_error_response(e)


# ============================================================
# LAMBDA HANDLER
# ============================================================

def handler(event: Dict, context: Any) -> Dict:
    """AWS Lambda handler for the API"""
    try:
        request = parse_event(event)
    except Exception as e:
        logger.exception("Unhandled exception parsing event")
        return internal_error_response(e).to_dict()

    return route_request(request).to_dict()
