"""Buyer interest submission"""
from datetime import datetime
from typing import Any, Dict
import logging

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from estate_listings.exceptions import NotFoundError, PersistenceError, ValidationError
from estate_listings.models.interest import BuyerInterest
from estate_listings.models.property import Property
from estate_listings.services.validation import validate_interest

logger = logging.getLogger(__name__)


class InterestService:
    """Appends buyer inquiries to a listing"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def submit_interest(self, property_id: int, payload: Dict[str, Any]) -> BuyerInterest:
        """Record one inquiry. No deduplication and no status restriction."""
        result = validate_interest(payload)
        if not result.ok:
            raise ValidationError(
                message="Name, phone, and email are required",
                details={"errors": result.errors},
            )

        now = datetime.utcnow()
        try:
            # Touch the listing first; zero rows means it does not exist
            touched = await self.db.execute(
                update(Property)
                .where(Property.id == property_id)
                .values(updated_at=now)
            )
            if touched.rowcount == 0:
                await self.db.rollback()
                raise NotFoundError(message="Property not found", details={"id": property_id})

            # Each inquiry is its own row so concurrent submissions never overwrite each other
            interest = BuyerInterest(property_id=property_id, created_at=now, **result.data)
            self.db.add(interest)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.exception(f"Database failure recording interest for property {property_id}: {e}")
            raise PersistenceError(message="Failed to submit interest")

        logger.info(f"Buyer interest {interest.id} recorded for property {property_id}")
        return interest
