import logging
from fastapi import Request, HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from src.services.site_search import ValidationError as SearchValidationError
from src.utils.custom_utils import generate_response

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions raised by routes or dependencies"""
    return generate_response(
        status_code=exc.status_code,
        response_message=str(exc.detail),
        customer_message=str(exc.detail),
        body=None,
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors (bad query parameter types and the like)"""
    errors = jsonable_encoder(exc.errors(), exclude={"input", "ctx"})
    logger.warning(f"Request validation failed on {request.url.path}: {len(errors)} error(s)")
    return generate_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        response_message="Request validation failed",
        customer_message="Some of the request parameters are invalid",
        body={"errors": errors}
    )


async def pydantic_validation_error_handler(request: Request, exc: ValidationError):
    """Handle pydantic validation errors raised while building models"""
    logger.error(f"Model validation error on {request.url.path}: {exc.error_count()} error(s)")
    return generate_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        response_message="Internal data validation error",
        customer_message="An unexpected error occurred",
        body=None
    )


async def search_validation_error_handler(request: Request, exc: SearchValidationError):
    """Handle search input validation errors"""
    return generate_response(
        status_code=status.HTTP_400_BAD_REQUEST,
        response_message=str(exc),
        customer_message=str(exc),
        body=None
    )
