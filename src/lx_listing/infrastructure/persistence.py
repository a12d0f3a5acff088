"""ListingRepository — concrete implementation of ListingRepositoryProtocol.

Every read eager-loads the owner relation (selectinload); implicit lazy
loads are not available on an AsyncSession.
create() only flushes; the service owns commit/rollback.
"""

import uuid
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.lx_common.id_generator import generate_id
from src.lx_listing.domain.models import Listing, ListingOwner, NewListing
from src.lx_listing.infrastructure.db_models import ListingORM

_WITH_OWNER = selectinload(ListingORM.owner)


def _orm_to_listing(row: ListingORM) -> Listing:
    return Listing(
        id=row.id,
        owner=ListingOwner(id=str(row.owner.id), username=row.owner.username),
        title=row.title,
        description=row.description,
        price_cents=row.price_cents,
        volume=row.volume,
        min_volume=row.min_volume,
        partial_ok=row.partial_ok,
        active=row.active,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class ListingRepository:
    async def list_active(self, db: AsyncSession) -> list[Listing]:
        stmt = (
            select(ListingORM)
            .options(_WITH_OWNER)
            .where(ListingORM.active.is_(True))
            .order_by(ListingORM.created_at.desc(), ListingORM.id.desc())
        )
        result = await db.execute(stmt)
        return [_orm_to_listing(row) for row in result.scalars().all()]

    async def get_by_id(self, db: AsyncSession, listing_id: str) -> Listing | None:
        stmt = select(ListingORM).options(_WITH_OWNER).where(ListingORM.id == listing_id)
        result = await db.execute(stmt)
        row = result.scalar_one_or_none()
        return _orm_to_listing(row) if row else None

    async def create(
        self,
        db: AsyncSession,
        owner_id: str,
        data: NewListing,
    ) -> Listing:
        now = datetime.now(UTC)
        row = ListingORM(
            id=generate_id(),
            owner_id=uuid.UUID(owner_id),
            title=data.title,
            description=data.description,
            price_cents=data.price_cents,
            volume=data.volume,
            min_volume=data.min_volume,
            partial_ok=data.partial_ok,
            active=True,
            created_at=now,
            updated_at=now,
        )
        db.add(row)
        await db.flush()
        await db.refresh(row, attribute_names=["owner"])
        return _orm_to_listing(row)
