from typing import Any, Dict, Optional
from fastapi.responses import ORJSONResponse


def generate_response(
    status_code: int,
    response_message: str,
    customer_message: str,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None
) -> ORJSONResponse:
    """Build the standard response envelope used by every endpoint.

    Args:
        status_code: HTTP status code
        response_message: Message for API consumers and logs
        customer_message: Message safe to show to end users
        body: Response payload
        headers: Optional extra response headers
    """
    return ORJSONResponse(
        status_code=status_code,
        content={
            "status_code": status_code,
            "response_message": response_message,
            "customer_message": customer_message,
            "body": body,
        },
        headers=headers,
    )
