"""Custom exceptions for the Vercel deployer."""

from typing import Any


class VercelDeployerError(Exception):
    """Base exception for the Vercel deployer."""

    http_status: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidParameterError(VercelDeployerError):
    """Item parameters are missing or invalid."""

    http_status = 422


class InvalidCredentialsError(VercelDeployerError):
    """Vercel credentials are missing or malformed."""

    http_status = 401


class EmptyContentError(VercelDeployerError):
    """Resolved HTML payload is blank."""

    http_status = 422

    def __init__(self, source: str):
        super().__init__(
            f"HTML content is empty ({source})",
            {"source": source},
        )
        self.source = source


class UpstreamError(VercelDeployerError):
    """The Vercel API answered with a non-2xx status or could not be reached."""

    http_status = 502

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int | None,
        body: Any = None,
    ):
        if status_code is None:
            message = f"Vercel API {method} {path} failed: {body}"
        else:
            message = f"Vercel API {method} {path} returned {status_code}"
            detail = _error_message(body)
            if detail:
                message = f"{message}: {detail}"
        super().__init__(
            message,
            {"method": method, "path": path, "status_code": status_code, "body": body},
        )
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body


class NodeOperationError(VercelDeployerError):
    """An item failed and the batch was not allowed to continue."""

    def __init__(self, item_index: int, cause: Exception):
        message = getattr(cause, "message", None) or str(cause)
        super().__init__(
            f"Item {item_index} failed: {message}",
            {"item_index": item_index, "error": type(cause).__name__},
        )
        self.item_index = item_index
        self.cause = cause
        if isinstance(cause, VercelDeployerError):
            self.http_status = cause.http_status


def _error_message(body: Any) -> str | None:
    """Pull the human-readable message out of a Vercel error payload."""
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("message")
        if isinstance(error, str):
            return error
    return None
