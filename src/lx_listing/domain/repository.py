"""Repository Protocol for listings.

Unit tests inject an AsyncMock conforming to this Protocol; the SQLAlchemy
implementation lives in infrastructure/persistence.py.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.lx_listing.domain.models import Listing, NewListing


class ListingRepositoryProtocol(Protocol):
    async def list_active(self, db: AsyncSession) -> list[Listing]: ...

    async def get_by_id(self, db: AsyncSession, listing_id: str) -> Listing | None: ...

    async def create(
        self,
        db: AsyncSession,
        owner_id: str,
        data: NewListing,
    ) -> Listing: ...
