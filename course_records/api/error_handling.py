"""
API error handling utilities.

Provides a decorator that turns domain exceptions raised by the services
into JSON error responses, and the application-wide handler that reports
request parsing failures as 400s.

Each endpoint keeps its historical response body key (``error`` or
``message``) per failure kind, so the decorator is parameterized per route.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from course_records.core.exceptions import (
    ConflictError,
    CourseRecordsException,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(status_code: int, key: str, message: str) -> JSONResponse:
    """Build a single-field JSON error body."""
    return JSONResponse(status_code=status_code, content={key: message})


def handle_api_errors(
    *,
    error_key: str = "error",
    not_found_key: str | None = None,
    conflict_key: str = "message",
    fallback_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    fallback_message: str | None = None,
    fallback_key: str | None = None,
) -> Callable[[F], F]:
    """
    Decorator factory mapping domain errors to JSON responses.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - The body key each endpoint uses for each failure kind

    Args:
        error_key: Body key for validation errors
        not_found_key: Body key for 404s (defaults to error_key)
        conflict_key: Body key for 409s
        fallback_status: Status for unexpected failures
        fallback_message: Fixed message for unexpected failures (None = str(exc))
        fallback_key: Body key for unexpected failures (defaults to error_key)
    """
    not_found_key = not_found_key or error_key
    fallback_key = fallback_key or error_key

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except NotFoundError as e:
                logger.warning(
                    "Resource not found",
                    extra={"resource": e.resource, "resource_id": str(e.resource_id)}
                )
                return error_response(status.HTTP_404_NOT_FOUND, not_found_key, e.message)

            except ValidationError as e:
                logger.warning("Invalid request", extra={"error": e.message, **e.details})
                return error_response(status.HTTP_400_BAD_REQUEST, error_key, e.message)

            except ConflictError as e:
                logger.warning("Conflicting write rejected", extra={"error": e.message, **e.details})
                return error_response(status.HTTP_409_CONFLICT, conflict_key, e.message)

            except CourseRecordsException as e:
                logger.error("Request failed", extra={"error": e.message, **e.details})
                return error_response(e.status_code, error_key, e.message)

            except Exception as e:
                logger.exception(
                    "Unexpected failure in request handler",
                    extra={"error": str(e), "handler": func.__name__}
                )
                return error_response(
                    fallback_status,
                    fallback_key,
                    fallback_message or str(e),
                )

        return wrapper  # type: ignore

    return decorator


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic error entries into one readable line."""
    parts = []
    for err in exc.errors():
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies, paths and query strings as 400 {error}."""
    message = format_validation_errors(exc)
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "error": message}
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "error", message)
