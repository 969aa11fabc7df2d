import time
from typing import Callable, Dict, Any
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from src.core.config import settings
from src.utils.logging.error_logger import error_logger
from src.utils.logging.activity_logger import logger_instance as activity_logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging request activity and errors.

    Only the shape of a request is recorded: method, path, status, timing
    and the length of the search text. The search text itself is never logged.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        # Start timer
        start_time = time.time()

        try:
            # Process the request
            response = await call_next(request)

            if not self._should_skip_logging(request.url.path):
                process_time = time.time() - start_time
                await self._log_activity(request, response, process_time)

            return response

        except Exception as e:
            await error_logger.log_error(
                error=e,
                request=request,
                additional_context=self._get_additional_context(request)
            )

            # Re-raise the exception to be handled by exception handlers
            raise

    def _should_skip_logging(self, path: str) -> bool:
        """
        Determine if logging should be skipped for this path.

        Args:
            path: Request path

        Returns:
            True if logging should be skipped, False otherwise
        """
        if path.startswith("/static/"):
            return True
        return path in settings.untracked_paths

    def _get_additional_context(self, request: Request) -> Dict[str, Any]:
        return {
            "content_type": request.headers.get("Content-Type"),
            "accept_language": request.headers.get("Accept-Language"),
        }

    async def _log_activity(
        self, request: Request, response: Response, process_time: float
    ) -> None:
        """
        Log the request activity.

        Args:
            request: The FastAPI request object
            response: The response object
            process_time: Request processing time in seconds
        """
        query_text = request.query_params.get("q")

        await activity_logger.log_activity(
            message=self._create_narrative(request, response),
            activity_type="api_request",
            metadata={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time_ms": round(process_time * 1000, 2),
                "query_length": len(query_text) if query_text is not None else None,
                "language": request.query_params.get("lang"),
            }
        )

    def _create_narrative(self, request: Request, response: Response) -> str:
        """
        Create a narrative description of the request.

        Args:
            request: The FastAPI request object
            response: The response object

        Returns:
            Narrative description
        """
        narrative = f"Visitor made a {request.method} request to {request.url.path}"

        if 200 <= response.status_code < 300:
            narrative += f" and received a successful response ({response.status_code})"
        elif 400 <= response.status_code < 500:
            narrative += f" but had a client error ({response.status_code})"
        elif 500 <= response.status_code < 600:
            narrative += f" but encountered a server error ({response.status_code})"
        else:
            narrative += f" and received a {response.status_code} response"

        return narrative
