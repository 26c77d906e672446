"""Map supply request failures onto HTTP errors."""
import logging

from fastapi import HTTPException, status
from pydantic import ValidationError

from src.integrations.contracts.requests import TransportError
from src.wizard.validation import FormValidationError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def to_http(self, exc: Exception) -> HTTPException:
        if isinstance(exc, FormValidationError):
            return HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={"error": "validation_error", "message": exc.message, "field_errors": exc.field_errors},
            )
        if isinstance(exc, ValidationError):
            field_errors = {".".join(str(p) for p in err["loc"]): err["msg"] for err in exc.errors()}
            return HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={"error": "validation_error", "message": "Invalid step data", "field_errors": field_errors},
            )
        if isinstance(exc, TransportError):
            logger.error("Supply request could not be delivered: %s", exc.__cause__ or exc)
            return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=exc.message)
        logger.error("Unhandled exception in supply request API: %s", exc, exc_info=exc)
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An internal error occurred while processing your request. Please try again later.",
        )
