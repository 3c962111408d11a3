"""Valentine tracking-link endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from valentine_api.application.schemas import (
    SuccessResponse,
    ValentineCreate,
    ValentineCreated,
    ValentineResponse,
)
from valentine_api.application.services import ValentineService
from valentine_api.domain.exceptions import EntityNotFoundError, RequiredFieldError
from valentine_api.infrastructure.dependencies import get_valentine_service
from valentine_api.presentation.api.request_parsing import path_id, read_json_body

router = APIRouter(prefix="/valentine", tags=["Valentines"])


@router.post("", response_model=ValentineCreated)
async def create_valentine(
    request: Request,
    service: ValentineService = Depends(get_valentine_service),
) -> ValentineCreated:
    """Create a valentine entry. Re-posting an existing tracking id is a no-op."""
    data = ValentineCreate.model_validate(await read_json_body(request))
    try:
        tracking_id = await service.create_valentine(data)
    except RequiredFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return ValentineCreated(tracking_id=tracking_id)


@router.post("/{tracking_id}/view", response_model=SuccessResponse)
async def record_view(
    tracking_id: str = Depends(path_id),
    service: ValentineService = Depends(get_valentine_service),
) -> SuccessResponse:
    """Count one view of the valentine link."""
    await service.record_view(tracking_id)
    return SuccessResponse()


@router.post("/{tracking_id}/yes", response_model=SuccessResponse)
async def record_yes(
    tracking_id: str = Depends(path_id),
    service: ValentineService = Depends(get_valentine_service),
) -> SuccessResponse:
    """Record that the recipient clicked Yes."""
    await service.record_yes(tracking_id)
    return SuccessResponse()


@router.get("/{tracking_id}", response_model=ValentineResponse)
async def get_valentine(
    tracking_id: str = Depends(path_id),
    service: ValentineService = Depends(get_valentine_service),
) -> ValentineResponse:
    """Dashboard data for a valentine link."""
    try:
        valentine = await service.get_valentine(tracking_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Valentine not found")
    return ValentineResponse.model_validate(valentine, from_attributes=True)
