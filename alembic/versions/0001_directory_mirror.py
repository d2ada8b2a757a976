"""directory mirror: buildings, places, reservations

Revision ID: 0001
Revises:
Create Date: 2024-05-06 09:00:00
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "buildings",
        sa.Column("upn", sa.String(255), primary_key=True),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("street", sa.String(255), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("postal_code", sa.String(20), nullable=True),
        sa.Column("country_or_region", sa.String(100), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("synced_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_buildings_display_name", "buildings", ["display_name"])
    op.create_index("ix_buildings_city", "buildings", ["city"])

    op.create_table(
        "places",
        sa.Column("upn", sa.String(255), primary_key=True),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("place_type", sa.String(20), nullable=False),
        sa.Column(
            "building_upn",
            sa.String(255),
            sa.ForeignKey("buildings.upn", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("floor", sa.String(50), nullable=True),
        sa.Column("label", sa.String(255), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=True),
        sa.Column("has_video", sa.Boolean(), nullable=False),
        sa.Column("has_audio", sa.Boolean(), nullable=False),
        sa.Column("has_display", sa.Boolean(), nullable=False),
        sa.Column("is_wheelchair_accessible", sa.Boolean(), nullable=False),
        sa.Column("fully_enclosed", sa.Boolean(), nullable=False),
        sa.Column("surface_hub", sa.Boolean(), nullable=False),
        sa.Column("whiteboard_camera", sa.Boolean(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("synced_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_places_display_name", "places", ["display_name"])
    op.create_index("ix_places_place_type", "places", ["place_type"])
    op.create_index("ix_places_building_upn", "places", ["building_upn"])

    op.create_table(
        "reservations",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "place_upn",
            sa.String(255),
            sa.ForeignKey("places.upn", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("start", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end", sa.DateTime(timezone=True), nullable=False),
        sa.Column("subject", sa.String(255), nullable=True),
        sa.Column("synced_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_reservations_place_upn", "reservations", ["place_upn"])
    op.create_index("ix_reservations_start", "reservations", ["start"])
    op.create_index("ix_reservations_end", "reservations", ["end"])


def downgrade() -> None:
    op.drop_table("reservations")
    op.drop_table("places")
    op.drop_table("buildings")
