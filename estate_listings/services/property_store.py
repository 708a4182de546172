"""Property store - persistence and schema enforcement for listings"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence
import logging
import math

from sqlalchemy import select, func, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from estate_listings.config import settings
from estate_listings.exceptions import NotFoundError, PersistenceError, ValidationError
from estate_listings.models.interest import BuyerInterest
from estate_listings.models.property import Property, PropertyStatus
from estate_listings.services.validation import (
    validate_property_draft,
    validate_property_update,
    validate_status,
)

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass
class PropertyFilter:
    """Conjunctive listing filter. None means no constraint on that dimension."""
    statuses: Optional[Sequence[PropertyStatus]] = None
    location: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_size: Optional[float] = None
    max_size: Optional[float] = None

    def to_conditions(self) -> list:
        conditions = []
        if self.statuses is not None:
            conditions.append(Property.status.in_(list(self.statuses)))
        if self.location and self.location.strip():
            pattern = f"%{_escape_like(self.location.strip())}%"
            conditions.append(Property.location.ilike(pattern, escape="\\"))
        if self.min_price is not None:
            conditions.append(Property.asking_price >= self.min_price)
        if self.max_price is not None:
            conditions.append(Property.asking_price <= self.max_price)
        if self.min_size is not None:
            conditions.append(Property.land_size >= self.min_size)
        if self.max_size is not None:
            conditions.append(Property.land_size <= self.max_size)
        return conditions


@dataclass
class PropertyPage:
    """One page of listing results"""
    items: List[Property]
    page: int
    limit: int
    total: int
    total_pages: int


class PropertyStore:
    """CRUD over the properties collection"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _persistence_failure(self, operation: str, exc: SQLAlchemyError) -> None:
        await self.db.rollback()
        logger.exception(f"Database failure during {operation}: {exc}")
        raise PersistenceError(message=f"Failed to {operation}")

    async def create(self, draft: Dict[str, Any]) -> Property:
        """Validate a submission and persist it as a pending listing"""
        result = validate_property_draft(draft)
        if not result.ok:
            raise ValidationError(message="Invalid property submission", details={"errors": result.errors})

        now = datetime.utcnow()
        property_obj = Property(
            **result.data,
            buyer_interests=[],
            created_at=now,
            updated_at=now,
        )
        try:
            self.db.add(property_obj)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._persistence_failure("create property", e)

        logger.info(f"Property {property_obj.id} created (pending review)")
        return property_obj

    async def get_by_id(self, property_id: int) -> Property:
        """Fetch one listing with its seller and interests"""
        try:
            result = await self.db.execute(
                select(Property)
                .where(Property.id == property_id)
                .execution_options(populate_existing=True)
            )
            property_obj = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self._persistence_failure("fetch property", e)

        if not property_obj:
            raise NotFoundError(message="Property not found", details={"id": property_id})
        return property_obj

    async def list(
        self,
        filters: Optional[PropertyFilter] = None,
        page: int = 1,
        limit: Optional[int] = None,
    ) -> PropertyPage:
        """Newest-first page of listings matching the filter"""
        limit = settings.DEFAULT_PAGE_SIZE if limit is None else limit
        if page < 1 or limit < 1:
            raise ValidationError(
                message="Invalid pagination",
                details={"errors": {"page": "must be at least 1", "limit": "must be at least 1"}},
            )

        conditions = (filters or PropertyFilter()).to_conditions()
        try:
            total = (
                await self.db.execute(
                    select(func.count()).select_from(Property).where(*conditions)
                )
            ).scalar_one()

            result = await self.db.execute(
                select(Property)
                .where(*conditions)
                .order_by(desc(Property.created_at), desc(Property.id))
                .offset((page - 1) * limit)
                .limit(limit)
            )
            items = list(result.scalars().all())
        except SQLAlchemyError as e:
            await self._persistence_failure("list properties", e)

        return PropertyPage(
            items=items,
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        )

    async def update(self, property_id: int, fields: Dict[str, Any]) -> Property:
        """Merge a partial update, re-validating every field present"""
        fields = dict(fields)
        errors: Dict[str, str] = {}
        values: Dict[str, Any] = {}

        has_status = "status" in fields
        if has_status:
            status_result = validate_status(fields.pop("status"))
            if status_result.ok:
                values.update(status_result.data)
            else:
                errors.update(status_result.errors)

        if fields or not has_status:
            result = validate_property_update(fields)
            if result.ok:
                values.update(result.data)
            else:
                errors.update(result.errors)

        if errors:
            raise ValidationError(message="Invalid property update", details={"errors": errors})

        property_obj = await self.get_by_id(property_id)
        for name, value in values.items():
            setattr(property_obj, name, value)
        property_obj.updated_at = datetime.utcnow()

        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._persistence_failure("update property", e)

        logger.info(f"Property {property_id} updated: {sorted(values)}")
        return await self.get_by_id(property_id)

    async def delete(self, property_id: int) -> None:
        """Remove a listing and its buyer interests"""
        property_obj = await self.get_by_id(property_id)
        try:
            await self.db.delete(property_obj)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._persistence_failure("delete property", e)

        logger.info(f"Property {property_id} deleted")

    async def count_by_status(self) -> Dict[str, int]:
        """Number of listings per lifecycle status"""
        counts = {status.value: 0 for status in PropertyStatus}
        try:
            result = await self.db.execute(
                select(Property.status, func.count(Property.id)).group_by(Property.status)
            )
            for status, count in result.all():
                counts[PropertyStatus(status).value] = count
        except SQLAlchemyError as e:
            await self._persistence_failure("count properties", e)
        return counts

    async def count_interests(self) -> int:
        try:
            result = await self.db.execute(select(func.count(BuyerInterest.id)))
            return result.scalar_one()
        except SQLAlchemyError as e:
            await self._persistence_failure("count buyer interests", e)
