"""Pydantic schemas for the /listing endpoints.

Listing bodies use camelCase on the wire (minVolume, partialOk, ownerId);
snake_case input is accepted too. Responses are built only through
ListingView.from_domain, which swaps the owner relation for a scalar
owner_id: a view has no field that could hold the nested owner.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.lx_listing.domain.models import Listing, NewListing

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# listings.volume / min_volume are INT columns
INT4_MAX = 2_147_483_647


class CreateListingRequest(BaseModel):
    """Body of POST /listing/.

    ``active`` is accepted for client compatibility and ignored; unknown keys
    (including any owner id) are dropped.
    """

    model_config = _CAMEL

    volume: int = Field(..., gt=0, le=INT4_MAX, strict=True)
    min_volume: int = Field(..., gt=0, le=INT4_MAX, strict=True)
    partial_ok: bool | None = Field(False, strict=True)
    active: bool | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, max_length=2000)
    price_cents: int | None = Field(None, ge=0)

    def to_domain(self) -> NewListing:
        return NewListing(
            title=self.title,
            description=self.description,
            price_cents=self.price_cents,
            volume=self.volume,
            min_volume=self.min_volume,
            partial_ok=bool(self.partial_ok),
        )


class ListingView(BaseModel):
    model_config = _CAMEL

    id: str
    owner_id: str
    title: str | None
    description: str | None
    price_cents: int | None
    volume: int
    min_volume: int
    partial_ok: bool
    active: bool
    created_at: str
    updated_at: str

    @classmethod
    def from_domain(cls, listing: Listing) -> "ListingView":
        return cls(
            id=listing.id,
            owner_id=listing.owner.id,
            title=listing.title,
            description=listing.description,
            price_cents=listing.price_cents,
            volume=listing.volume,
            min_volume=listing.min_volume,
            partial_ok=listing.partial_ok,
            active=listing.active,
            created_at=listing.created_at.isoformat(),
            updated_at=listing.updated_at.isoformat(),
        )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
