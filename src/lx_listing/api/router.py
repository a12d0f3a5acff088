"""lx_listing REST endpoints.

GET  /listing/              — active listings
GET  /listing/{listing_id}  — one listing (inactive ones: owner only)
POST /listing/              — create a listing owned by the caller
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.lx_common.database import get_db_session
from src.lx_common.response import ApiResponse, success_response
from src.lx_gateway.auth.dependencies import get_current_user
from src.lx_gateway.user.db_models import UserModel
from src.lx_listing.application.schemas import CreateListingRequest
from src.lx_listing.application.service import ListingApplicationService

router = APIRouter(prefix="/listing", tags=["listing"])

_service = ListingApplicationService()


@router.get("/", response_model=ApiResponse)
async def get_active_listings(
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    views = await _service.list_active_listings(db, str(current_user.id))
    return success_response([v.to_wire() for v in views], request=request)


@router.get("/{listing_id}", response_model=ApiResponse)
async def get_one_listing(
    listing_id: str,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    view = await _service.get_listing(db, listing_id, str(current_user.id))
    return success_response(view.to_wire(), request=request)


@router.post("/", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def create_listing(
    body: CreateListingRequest,
    request: Request,
    current_user: Annotated[UserModel, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    view = await _service.create_listing(db, body, str(current_user.id))
    return success_response(view.to_wire(), "Listing created", request)
