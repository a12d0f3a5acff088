"""003: listings table

Revision ID: 003
Revises: 002
Create Date: 2026-10-12
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE listings (
            id              VARCHAR(32)     PRIMARY KEY,
            owner_id        UUID            NOT NULL REFERENCES users (id),
            title           VARCHAR(200),
            description     TEXT,
            price_cents     BIGINT,
            volume          INT             NOT NULL,
            min_volume      INT             NOT NULL,
            partial_ok      BOOLEAN         NOT NULL DEFAULT FALSE,
            active          BOOLEAN         NOT NULL DEFAULT TRUE,
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_listings_volume_gt_0      CHECK (volume > 0),
            CONSTRAINT ck_listings_min_volume_gt_0  CHECK (min_volume > 0),
            CONSTRAINT ck_listings_price_gte_0      CHECK (price_cents IS NULL OR price_cents >= 0),
            CONSTRAINT ck_listings_whole_fill       CHECK (partial_ok OR volume = min_volume)
        );
    """)
    op.execute("CREATE INDEX idx_listings_owner_id ON listings (owner_id);")
    op.execute(
        "CREATE INDEX idx_listings_active_created ON listings (created_at DESC, id DESC) "
        "WHERE active;"
    )
    op.execute("""
        CREATE TRIGGER trg_listings_updated_at
            BEFORE UPDATE ON listings
            FOR EACH ROW EXECUTE FUNCTION fn_touch_updated_at();
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS listings CASCADE;")
