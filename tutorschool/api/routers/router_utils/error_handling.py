"""
Router error handling.

Decorator translating domain exceptions raised by services into
HTTPExceptions with consistent logging.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from tutorschool.core.exceptions import (
    ExchangeRateError,
    NotFoundError,
    ScheduleCheckError,
    ScheduleConflictError,
    TutorSchoolException,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle service errors and transform them into HTTPExceptions.

    Mapping:
    - NotFoundError -> 404
    - ValidationError -> 400
    - ScheduleConflictError -> 409 with the validation result as detail
    - ScheduleCheckError, ExchangeRateError -> 503
    - anything else -> 500
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFoundError as e:
            logger.warning("Resource not found", extra={"error": e.message, **e.details})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": e.message, **e.details})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except ScheduleConflictError as e:
            logger.info(
                "Schedule conflict",
                extra={"conflict_count": len(e.result.conflicting_sessions), **e.details},
            )
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=e.result.model_dump(mode="json"),
            )

        except (ScheduleCheckError, ExchangeRateError) as e:
            logger.error("Dependency unavailable", extra={"error": e.message, **e.details})
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)

        except TutorSchoolException as e:
            logger.error("Unhandled domain error", extra={"error": e.message, **e.details})
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)

        except Exception as e:
            logger.exception("Unexpected failure in request handler", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred",
            )

    return wrapper  # type: ignore
