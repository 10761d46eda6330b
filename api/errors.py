"""
Error types raised by the adapters and routes

Each error carries the HTTP status and the public ``error`` text returned to
the caller. The underlying cause stays on ``__cause__`` for logging only.
"""


class ApiError(Exception):
    """Base class for errors that map to a fixed HTTP response"""

    status_code = 500
    public_message = "Internal server error"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.public_message)
        self.detail = detail

    def to_body(self) -> dict:
        return {"error": self.public_message}


class RouteNotFound(ApiError):
    status_code = 404
    public_message = "Not found"


class RequestValidationError(ApiError):
    status_code = 400
    public_message = "Invalid request"

    def to_body(self) -> dict:
        return {"error": self.detail or self.public_message}


class InvocationError(ApiError):
    """Bedrock call failed or returned no usable text"""
    public_message = "Failed to invoke model"


class QueryError(ApiError):
    """RDS Data API statement failed"""
    public_message = "Failed to query data store"
