"""
Blog error handling utilities.

Provides a decorator that maps domain exceptions to HTTP errors and the
application-wide handlers that render every error as ``{"err": ...}``.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blogger.observability.log_utils import log_exception_with_context, log_with_context
from blogger.core.exceptions import (
    BloggerException,
    EmailAlreadyRegisteredError,
    NotAuthorizedError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_blog_errors(func: F) -> F:
    """
    Decorator to turn blog errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with their context
    - Mapping specific exceptions to HTTP status codes
    - Surfacing raw persistence errors as 500s
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except NotFoundError as e:
            log_with_context(logger, logging.WARNING, "Resource not found", error=str(e), **e.details)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

        except NotAuthorizedError as e:
            log_with_context(logger, logging.WARNING, "Forbidden", error=str(e), **e.details)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

        except EmailAlreadyRegisteredError as e:
            log_with_context(logger, logging.WARNING, "Duplicate signup", error=str(e))
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except BloggerException as e:
            log_with_context(logger, logging.WARNING, "Invalid request", error=str(e), **e.details)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except ValidationError as e:
            log_with_context(logger, logging.WARNING, "Pydantic validation error", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e),
            )

        except SQLAlchemyError as e:
            log_exception_with_context(logger, "Database error", e, handler=func.__name__)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            )

        except HTTPException:
            raise

        except Exception as e:
            log_exception_with_context(logger, "Unexpected failure", e, handler=func.__name__)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {str(e)}",
            )

    return wrapper  # type: ignore


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"err": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "err": f"{location}: {message}" if location else message,
            "errors": [
                {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
                for e in errors
            ],
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render HTTP and validation errors in the ``{"err": ...}`` shape."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
