"""Property lifecycle service

Status semantics and visibility rules on top of the property store:

    pending  -> approved | rejected
    approved -> rejected          (unpublish)
    rejected -> approved          (reconsider)

Nothing returns to pending. Only approved listings are visible to the public;
every other view goes through the admin session gate.
"""
from dataclasses import replace
from typing import Any, Dict, Optional, Union
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from estate_listings.exceptions import NotFoundError, ValidationError
from estate_listings.models.property import Property, PropertyStatus
from estate_listings.services.auth import SessionClaims, require_admin
from estate_listings.services.property_store import PropertyStore, PropertyFilter, PropertyPage
from estate_listings.services.validation import validate_status

logger = logging.getLogger(__name__)

ALL_STATUSES = "all"

ALLOWED_TRANSITIONS = {
    PropertyStatus.PENDING: {PropertyStatus.APPROVED, PropertyStatus.REJECTED},
    PropertyStatus.APPROVED: {PropertyStatus.REJECTED},
    PropertyStatus.REJECTED: {PropertyStatus.APPROVED},
}


def can_transition(current: PropertyStatus, target: PropertyStatus) -> bool:
    """Repeating the current status is allowed as a no-op"""
    return current == target or target in ALLOWED_TRANSITIONS.get(current, set())


class PropertyLifecycleService:
    """Review workflow and browsing over listings"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.store = PropertyStore(db)

    async def submit(self, draft: Dict[str, Any]) -> Property:
        """Seller submission; always lands as pending"""
        return await self.store.create(draft)

    async def browse(
        self,
        filters: Optional[PropertyFilter] = None,
        page: int = 1,
        limit: Optional[int] = None,
        session: Optional[SessionClaims] = None,
        status: Optional[Union[str, PropertyStatus]] = None,
    ) -> PropertyPage:
        """List listings.

        Without a status (or with "approved") this is the public browse and
        only approved listings are returned. "all", "pending" and "rejected"
        are admin-scoped lists.
        """
        filters = filters or PropertyFilter()
        # An empty ?status= means no filter
        status = status or None

        if status is None or status == PropertyStatus.APPROVED.value:
            statuses = [PropertyStatus.APPROVED]
        elif status == ALL_STATUSES:
            require_admin(session)
            statuses = None
        else:
            result = validate_status(status)
            if not result.ok:
                raise ValidationError(message="Invalid status filter", details={"errors": result.errors})
            require_admin(session)
            statuses = [result.data["status"]]

        return await self.store.list(replace(filters, statuses=statuses), page=page, limit=limit)

    async def get(self, property_id: int, session: Optional[SessionClaims] = None) -> Property:
        """Full listing. Unreviewed or rejected listings exist only for admins."""
        property_obj = await self.store.get_by_id(property_id)
        if property_obj.status != PropertyStatus.APPROVED and not (session and session.is_admin):
            raise NotFoundError(message="Property not found", details={"id": property_id})
        return property_obj

    async def transition(
        self,
        property_id: int,
        new_status: Union[str, PropertyStatus],
        session: Optional[SessionClaims],
    ) -> Property:
        """Admin status change, guarded by ALLOWED_TRANSITIONS"""
        admin = require_admin(session)

        property_obj = await self.store.get_by_id(property_id)
        current = PropertyStatus(property_obj.status)
        target = self._checked_target(current, new_status)

        if current == target:
            return property_obj

        updated = await self.store.update(property_id, {"status": target})
        logger.info(f"Property {property_id} {current.value} -> {target.value} by user {admin.id}")
        return updated

    async def edit(
        self,
        property_id: int,
        fields: Dict[str, Any],
        session: Optional[SessionClaims],
    ) -> Property:
        """Admin edit of listing fields; a status in the payload goes through the guard"""
        admin = require_admin(session)

        fields = dict(fields)
        new_status = fields.pop("status", None)

        if new_status is None:
            return await self.store.update(property_id, fields)

        property_obj = await self.store.get_by_id(property_id)
        current = PropertyStatus(property_obj.status)
        target = self._checked_target(current, new_status)

        if current == target and not fields:
            return property_obj

        # Fields and status land in one commit
        updated = await self.store.update(property_id, {**fields, "status": target})
        if current != target:
            logger.info(f"Property {property_id} {current.value} -> {target.value} by user {admin.id}")
        return updated

    @staticmethod
    def _checked_target(current: PropertyStatus, new_status: Union[str, PropertyStatus]) -> PropertyStatus:
        result = validate_status(new_status)
        if not result.ok:
            raise ValidationError(message="Invalid status", details={"errors": result.errors})
        target = result.data["status"]

        if not can_transition(current, target):
            raise ValidationError(
                message=f"Cannot change status from {current.value} to {target.value}",
                details={"errors": {"status": f"{current.value} -> {target.value} is not allowed"}},
            )
        return target

    async def delete(self, property_id: int, session: Optional[SessionClaims]) -> None:
        admin = require_admin(session)
        await self.store.delete(property_id)
        logger.info(f"Property {property_id} deleted by user {admin.id}")

    async def stats(self, session: Optional[SessionClaims]) -> Dict[str, int]:
        """Dashboard counters for the admin review screen"""
        require_admin(session)
        counts = await self.store.count_by_status()
        return {
            "total": sum(counts.values()),
            **counts,
            "total_interests": await self.store.count_interests(),
        }
