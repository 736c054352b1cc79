from typing import Union

from fastapi import APIRouter, Depends, HTTPException, status

from app.features.scan.dependencies.provider import get_audit_provider
from app.features.scan.schemas.scan import (
    ErrorResponse,
    FallbackScanResult,
    LiveScanResult,
    ScanRequest,
)
from app.features.scan.services.providers.base import AuditProvider
from app.features.scan.services.scan.scan import ScanService
from app.platform.logger import get_logger
from app.platform.response import api_response
from app.platform.utils.url_validator import validate_url

logger = get_logger(__name__)

router = APIRouter(prefix="/scan", tags=["scan"])


@router.post(
    "",
    response_model=Union[LiveScanResult, FallbackScanResult],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def scan_url(
    scan_in: ScanRequest,
    provider: AuditProvider = Depends(get_audit_provider),
):
    is_valid, url, error_message = validate_url(scan_in.url or "")

    if not is_valid:
        logger.warning(f"Rejected scan request for {scan_in.url!r}: {error_message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error_message)

    logger.info(f"Starting accessibility scan for URL: {url}")

    result = await ScanService(provider).scan(url)

    return api_response(data=result)
