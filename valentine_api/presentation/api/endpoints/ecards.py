"""E-card endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from valentine_api.application.schemas import (
    ECardCreate,
    ECardCreated,
    ECardResponse,
    SuccessResponse,
)
from valentine_api.application.services import ECardService
from valentine_api.domain.exceptions import EntityNotFoundError, RequiredFieldError
from valentine_api.infrastructure.dependencies import get_ecard_service
from valentine_api.presentation.api.request_parsing import path_id, read_json_body

router = APIRouter(prefix="/ecard", tags=["E-cards"])


@router.post("", response_model=ECardCreated)
async def create_ecard(
    request: Request,
    service: ECardService = Depends(get_ecard_service),
) -> ECardCreated:
    """Create an e-card. Re-posting an existing id is a no-op."""
    data = ECardCreate.model_validate(await read_json_body(request))
    try:
        ecard_id = await service.create_ecard(data)
    except RequiredFieldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return ECardCreated(ecard_id=ecard_id)


@router.get("/{ecard_id}", response_model=ECardResponse)
async def get_ecard(
    ecard_id: str = Depends(path_id),
    service: ECardService = Depends(get_ecard_service),
) -> ECardResponse:
    """Load an e-card for display."""
    try:
        ecard = await service.get_ecard(ecard_id)
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="E-card not found")
    return ECardResponse.model_validate(ecard, from_attributes=True)


@router.post("/{ecard_id}/view", response_model=SuccessResponse)
async def mark_viewed(
    ecard_id: str = Depends(path_id),
    service: ECardService = Depends(get_ecard_service),
) -> SuccessResponse:
    await service.mark_viewed(ecard_id)
    return SuccessResponse()


@router.post("/{ecard_id}/respond", response_model=SuccessResponse)
async def record_response(
    ecard_id: str = Depends(path_id),
    service: ECardService = Depends(get_ecard_service),
) -> SuccessResponse:
    """Record the recipient's Yes."""
    await service.record_response(ecard_id)
    return SuccessResponse()
