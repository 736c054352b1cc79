from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_response(
    *,
    data: Optional[Any] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Success responses. The payload is sent as-is (no envelope) because the
    browser UI consumes the scan result shape verbatim.
    """
    data = jsonable_encoder(data, by_alias=True) if data is not None else {}

    return JSONResponse(status_code=status_code, content=data)


def error_response(
    *,
    error: str,
    details: Optional[str] = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> JSONResponse:
    """
    Error responses: `{"error": ..., "details": ...}`, details omitted when empty.
    """
    content = {"error": error}
    if details:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content)
