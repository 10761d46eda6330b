"""
Model Invocation Route
"""
import logging
from typing import Any, Tuple

from api.bedrock import BedrockInvoker
from api.errors import InvocationError, RequestValidationError
from api.models import InboundRequest, PromptRequest

logger = logging.getLogger(__name__)


def invoke_model(request: InboundRequest, invoker: BedrockInvoker) -> Tuple[int, Any]:
    """
    Run the prompt from the request body through the model
    Returns: (status_code, response_body)
    Malformed JSON is left to the caller's error handling
    """
    try:
        prompt = PromptRequest.from_body(request.body).prompt
    except RequestValidationError as e:
        logger.warning(f"Rejected model request: {e.detail}")
        return e.status_code, e.to_body()

    try:
        result = invoker.invoke(prompt)
    except InvocationError as e:
        logger.error(f"Error invoking Bedrock: {e}", exc_info=e.__cause__ or e)
        return e.status_code, e.to_body()

    return 200, {"result": result}
