"""ListingApplicationService — list, get and create listings.

The principal is always passed in explicitly by the router. Domain errors
are raised (never returned) and mapped to HTTP by the AppError handler in
src/main.py, so a failed check ends the call before anything is serialized
or persisted.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.lx_common.errors import ListingNotFoundError, MinVolumeError
from src.lx_listing.application.schemas import CreateListingRequest, ListingView
from src.lx_listing.domain.models import NewListing
from src.lx_listing.domain.repository import ListingRepositoryProtocol
from src.lx_listing.infrastructure.persistence import ListingRepository

logger = logging.getLogger(__name__)


def check_min_volume(data: NewListing) -> None:
    """Without partial fills a listing must be taken whole: volume == min_volume."""
    if not data.partial_ok and data.volume != data.min_volume:
        raise MinVolumeError(data.volume, data.min_volume)


class ListingApplicationService:
    def __init__(self, repo: ListingRepositoryProtocol | None = None) -> None:
        self._repo: ListingRepositoryProtocol = repo or ListingRepository()

    async def list_active_listings(
        self, db: AsyncSession, principal_id: str
    ) -> list[ListingView]:
        # Every listing is visible to every principal here; principal_id is
        # still passed so all three operations share the same call shape.
        listings = await self._repo.list_active(db)
        return [ListingView.from_domain(listing) for listing in listings]

    async def get_listing(
        self, db: AsyncSession, listing_id: str, principal_id: str
    ) -> ListingView:
        listing = await self._repo.get_by_id(db, listing_id)
        if listing is None:
            raise ListingNotFoundError()
        if not listing.is_visible_to(principal_id):
            logger.debug("Hiding inactive listing %s from non-owner", listing_id)
            raise ListingNotFoundError()
        return ListingView.from_domain(listing)

    async def create_listing(
        self, db: AsyncSession, body: CreateListingRequest, principal_id: str
    ) -> ListingView:
        data = body.to_domain()
        check_min_volume(data)

        try:
            listing = await self._repo.create(db, principal_id, data)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info(
            "Listing %s created by %s (volume=%d min_volume=%d partial_ok=%s)",
            listing.id,
            principal_id,
            listing.volume,
            listing.min_volume,
            listing.partial_ok,
        )
        return ListingView.from_domain(listing)
