"""
Envelope to HTTP response conversion.
"""
from fastapi import status
from fastapi.responses import JSONResponse

from ..core.exceptions import ERROR_STATUS_CODES
from ..models.envelope import Envelope


def envelope_response(envelope: Envelope, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Serialize an envelope; failures take the status of their error code."""
    if envelope.success:
        status_code = success_status
    else:
        status_code = ERROR_STATUS_CODES.get(
            envelope.error_code, status.HTTP_400_BAD_REQUEST
        )
    return JSONResponse(status_code=status_code, content=envelope.to_wire())
