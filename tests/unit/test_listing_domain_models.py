from datetime import UTC, datetime

import pytest

from src.lx_common.errors import MinVolumeError
from src.lx_listing.application.service import check_min_volume
from src.lx_listing.domain.models import Listing, ListingOwner, NewListing


def _listing(active: bool) -> Listing:
    now = datetime.now(UTC)
    return Listing(
        id="1", owner=ListingOwner(id="owner-1", username="seller"),
        title=None, description=None, price_cents=None,
        volume=1, min_volume=1, partial_ok=False, active=active,
        created_at=now, updated_at=now,
    )


def _new(volume: int, min_volume: int, partial_ok: bool) -> NewListing:
    return NewListing(
        title=None, description=None, price_cents=None,
        volume=volume, min_volume=min_volume, partial_ok=partial_ok,
    )


class TestVisibility:
    def test_active_visible_to_everyone(self):
        assert _listing(active=True).is_visible_to("someone-else")

    def test_inactive_visible_to_owner(self):
        assert _listing(active=False).is_visible_to("owner-1")

    def test_inactive_hidden_from_others(self):
        assert not _listing(active=False).is_visible_to("someone-else")


class TestCheckMinVolume:
    def test_equal_volumes_pass(self):
        check_min_volume(_new(10, 10, partial_ok=False))

    def test_partial_ok_allows_mismatch(self):
        check_min_volume(_new(7, 10, partial_ok=True))
        check_min_volume(_new(20, 10, partial_ok=True))

    @pytest.mark.parametrize("volume,min_volume", [(7, 10), (11, 10)])
    def test_mismatch_rejected(self, volume, min_volume):
        with pytest.raises(MinVolumeError) as exc:
            check_min_volume(_new(volume, min_volume, partial_ok=False))
        assert exc.value.code == 2002
        assert str(volume) in exc.value.message
