"""Domain models for lx_listing — pure dataclasses, no persistence concerns."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ListingOwner:
    """The User a listing belongs to. Never serialized as-is."""

    id: str
    username: str


@dataclass
class Listing:
    id: str
    owner: ListingOwner
    title: str | None
    description: str | None
    price_cents: int | None
    volume: int
    min_volume: int
    partial_ok: bool
    active: bool
    created_at: datetime
    updated_at: datetime

    def is_visible_to(self, principal_id: str) -> bool:
        """Inactive listings are visible to their owner only."""
        return self.active or self.owner.id == principal_id


@dataclass
class NewListing:
    """Validated creation input. Owner and active flag are decided by the service."""

    title: str | None
    description: str | None
    price_cents: int | None
    volume: int
    min_volume: int
    partial_ok: bool
