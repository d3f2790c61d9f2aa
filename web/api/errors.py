"""API errors and the request wrapper that maps them to responses."""

from collections.abc import Callable

from loguru import logger


class ApiError(Exception):
    """Error with an HTTP status and a short machine-readable code."""

    status = 500
    error = "Internal Server Error"

    def __init__(self, message: str = "Internal server error", status: int | None = None, error: str | None = None):
        self.message = message
        if status is not None:
            self.status = status
        if error is not None:
            self.error = error
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message, "status": self.status}


class MethodNotAllowedError(ApiError):
    status = 405
    error = "Method Not Allowed"


class UnauthorizedError(ApiError):
    status = 401
    error = "Unauthorized"


class ConfigurationError(ApiError):
    status = 500
    error = "Configuration Error"


class ValidationError(ApiError):
    status = 400
    error = "Bad Request"


class IngestionError(ApiError):
    status = 500
    error = "Ingestion Failed"


def handle_request(view: Callable[[], dict]) -> tuple[int, dict]:
    """Run a view body, turning any raised error into (status, error payload)."""
    try:
        return 200, view()
    except ApiError as e:
        logger.warning("Request rejected ({}): {}", e.status, e.message)
        return e.status, e.to_dict()
    except Exception as e:
        logger.exception("Unexpected error while handling request")
        err = IngestionError(str(e) or e.__class__.__name__)
        return err.status, err.to_dict()
