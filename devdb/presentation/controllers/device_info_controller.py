"""
Device Info Router - Presentation Layer

This module defines the FastAPI router for the GetDeviceInfo operation.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from devdb.application.dtos.device_info_dto import DeviceInfoReplyDTO, DeviceListDTO
from devdb.application.use_cases.device_info_use_cases import GetDeviceInfoUseCase
from devdb.domain.entities.errors import DataStoreUnavailableError
from devdb.shared import get_logger, request_context

logger = get_logger(__name__)

router = APIRouter(prefix="/devdb", tags=["DevDB"])


@router.post(
    "/GetDeviceInfo",
    response_model=DeviceInfoReplyDTO,
    operation_id="GetDeviceInfo",
)
@inject
async def get_device_info(
    device_list: DeviceListDTO,
    get_device_info_use_case: GetDeviceInfoUseCase = Depends(
        Provide["get_device_info_use_case"]
    ),
) -> DeviceInfoReplyDTO:
    """
    Resolve metadata for a batch of device names.

    Returns one entry per requested name, in request order. Devices that
    cannot be resolved carry an error message in their entry instead of
    failing the request.

    Args:
        device_list: Device names to resolve
        get_device_info_use_case: Injected use case for device lookups

    Returns:
        DeviceInfoReplyDTO: Entries in request order

    Raises:
        HTTPException: 503 if the device database is unavailable, 500 on
            any other unexpected failure
    """
    with request_context(rpc="GetDeviceInfo"):
        return await _resolve(device_list, get_device_info_use_case)


async def _resolve(
    device_list: DeviceListDTO, get_device_info_use_case: GetDeviceInfoUseCase
) -> DeviceInfoReplyDTO:
    logger.info("device_info.requested", devices=device_list.device)

    try:
        reply = await get_device_info_use_case.execute(device_list.device)

    except DataStoreUnavailableError as e:
        logger.error(
            "device_info.datastore_unavailable",
            count=len(device_list.device),
            error=e.message,
            details=e.details,
            exc_info=e,
        )
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )

    except Exception as e:
        logger.error(
            "device_info.request_failed",
            count=len(device_list.device),
            error=str(e),
            exc_info=e,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to resolve device info",
        )

    logger.info("device_info.resolved", count=len(reply))
    return DeviceInfoReplyDTO.from_domain(reply)
