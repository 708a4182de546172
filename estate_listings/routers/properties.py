"""Property listings router"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime
import logging

from estate_listings.config import settings
from estate_listings.database import get_db
from estate_listings.models.property import PropertyStatus, LandSizeUnit
from estate_listings.routers.auth import get_session
from estate_listings.services.auth import SessionClaims
from estate_listings.services.interest import InterestService
from estate_listings.services.lifecycle import PropertyLifecycleService
from estate_listings.services.property_store import PropertyFilter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/properties", tags=["Properties"])


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; both accepted on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Request Models
# Fields are optional here so missing values are reported by the listing validators
class SellerInput(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    details: Optional[str] = None


class PropertyCreateRequest(CamelModel):
    """Seller submission"""
    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    land_size: Optional[float] = None
    land_size_unit: Optional[str] = None
    asking_price: Optional[float] = None
    images: Optional[List[str]] = None
    youtube_video: Optional[str] = None
    seller: Optional[SellerInput] = None


class PropertyUpdateRequest(CamelModel):
    """Admin edit; seller and interests are not editable"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    land_size: Optional[float] = None
    land_size_unit: Optional[str] = None
    asking_price: Optional[float] = None
    images: Optional[List[str]] = None
    youtube_video: Optional[str] = None
    status: Optional[str] = None


class StatusChangeRequest(CamelModel):
    status: str


class InterestRequest(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


# Response Models
class SellerResponse(CamelModel):
    name: str
    phone: str
    email: str
    details: str = ""


class BuyerInterestResponse(CamelModel):
    id: int
    name: str
    phone: str
    email: str
    message: str
    created_at: datetime


class PropertySummary(CamelModel):
    """Public listing card - no seller contact, no buyer interests"""
    id: int
    title: str
    description: str
    location: str
    land_size: float
    land_size_unit: LandSizeUnit
    asking_price: float
    images: List[str]
    youtube_video: Optional[str]
    status: PropertyStatus
    created_at: datetime
    updated_at: datetime


class PropertyDetail(PropertySummary):
    seller: SellerResponse
    buyer_interests: List[BuyerInterestResponse]


class PropertyEnvelope(CamelModel):
    success: bool = True
    property: PropertyDetail


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class PropertyListEnvelope(CamelModel):
    success: bool = True
    properties: List[PropertySummary]
    pagination: Pagination


class PropertyStats(CamelModel):
    total: int
    pending: int
    approved: int
    rejected: int
    total_interests: int


class StatsEnvelope(CamelModel):
    success: bool = True
    stats: PropertyStats


class MessageEnvelope(CamelModel):
    success: bool = True
    message: str


def detail_envelope(property_obj) -> PropertyEnvelope:
    return PropertyEnvelope(property=PropertyDetail.model_validate(property_obj))


# Endpoints
@router.get("", response_model=PropertyListEnvelope)
async def list_properties(
    status_filter: Optional[str] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    location: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    min_size: Optional[float] = Query(None, alias="minSize"),
    max_size: Optional[float] = Query(None, alias="maxSize"),
    session: Optional[SessionClaims] = Depends(get_session),
    db: AsyncSession = Depends(get_db)
):
    """Browse listings. Approved only unless an admin asks for another status or "all"."""
    filters = PropertyFilter(
        location=location,
        min_price=min_price,
        max_price=max_price,
        min_size=min_size,
        max_size=max_size,
    )
    result = await PropertyLifecycleService(db).browse(
        filters, page=page, limit=limit, session=session, status=status_filter
    )
    return PropertyListEnvelope(
        properties=[PropertySummary.model_validate(p) for p in result.items],
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get("/stats", response_model=StatsEnvelope)
async def property_stats(
    session: Optional[SessionClaims] = Depends(get_session),
    db: AsyncSession = Depends(get_db)
):
    """Review dashboard counters (admin only)"""
    stats = await PropertyLifecycleService(db).stats(session)
    return StatsEnvelope(stats=PropertyStats(**stats))


@router.get("/{property_id}", response_model=PropertyEnvelope)
async def get_property(
    property_id: int,
    session: Optional[SessionClaims] = Depends(get_session),
    db: AsyncSession = Depends(get_db)
):
    """Full listing including seller contact and buyer interests"""
    property_obj = await PropertyLifecycleService(db).get(property_id, session=session)
    return detail_envelope(property_obj)


@router.post("", response_model=PropertyEnvelope, status_code=status.HTTP_201_CREATED)
async def create_property(
    request: PropertyCreateRequest,
    db: AsyncSession = Depends(get_db)
):
    """Submit a listing for review"""
    property_obj = await PropertyLifecycleService(db).submit(request.model_dump(exclude_unset=True))
    return detail_envelope(property_obj)


@router.put("/{property_id}", response_model=PropertyEnvelope)
async def update_property(
    property_id: int,
    request: PropertyUpdateRequest,
    session: Optional[SessionClaims] = Depends(get_session),
    db: AsyncSession = Depends(get_db)
):
    """Edit listing fields (admin only). A status change is checked against the review workflow."""
    property_obj = await PropertyLifecycleService(db).edit(
        property_id, request.model_dump(exclude_unset=True), session
    )
    return detail_envelope(property_obj)


@router.patch("/{property_id}/status", response_model=PropertyEnvelope)
async def change_status(
    property_id: int,
    request: StatusChangeRequest,
    session: Optional[SessionClaims] = Depends(get_session),
    db: AsyncSession = Depends(get_db)
):
    """Approve or reject a listing (admin only)"""
    property_obj = await PropertyLifecycleService(db).transition(property_id, request.status, session)
    return detail_envelope(property_obj)


@router.delete("/{property_id}", response_model=MessageEnvelope)
async def delete_property(
    property_id: int,
    session: Optional[SessionClaims] = Depends(get_session),
    db: AsyncSession = Depends(get_db)
):
    """Delete a listing and its buyer interests (admin only)"""
    await PropertyLifecycleService(db).delete(property_id, session)
    return MessageEnvelope(message="Property deleted successfully")


@router.post("/{property_id}/interest", response_model=MessageEnvelope, status_code=status.HTTP_201_CREATED)
async def submit_interest(
    property_id: int,
    request: InterestRequest,
    db: AsyncSession = Depends(get_db)
):
    """Register a buyer's interest in a listing"""
    await InterestService(db).submit_interest(property_id, request.model_dump(exclude_unset=True))
    return MessageEnvelope(message="Interest submitted successfully")
