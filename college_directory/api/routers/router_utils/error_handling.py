"""
Directory error handling utilities.

Provides a decorator for consistent error handling across the directory
API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from college_directory.core.exceptions import (
    DatasetLoadError,
    InvalidQueryError,
    RecordNotFoundError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_directory_errors(func: F) -> F:
    """
    Decorator to transform directory errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (record kind and id)
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except RecordNotFoundError as e:
            logger.warning(
                "Record not found",
                extra={"kind": e.kind, "record_id": e.record_id, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message,
            )

        except InvalidQueryError as e:
            logger.warning("Invalid directory request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message,
            )

        except DatasetLoadError as e:
            logger.error("Dataset unavailable", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Directory dataset is unavailable",
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in directory operation",
                extra={"error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during directory operation",
            )

    return wrapper  # type: ignore
