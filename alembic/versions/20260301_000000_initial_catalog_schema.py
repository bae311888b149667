"""Initial catalog schema and seed data for Dhivyuga

Revision ID: 20260301_000000
Revises: None
Create Date: 2026-03-01 00:00:00.000000

Creates every table of the mantra catalog and seeds the reference data the
admin forms start from:
- Catalog tables (categories, deities, recitation metadata, mantras)
- Translation tables (languages, mantra translations)
- Profiles used for admin sign-in
- Full-text GIN index over mantra title and text (PostgreSQL only)
- Default languages, recitation counts, recitation times and kalams

Revision format: YYYYMMDD_HHMMSS_description

"""

import uuid
from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20260301_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column("id", sa.Uuid(), nullable=False)


def _created_at_column() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)


def upgrade() -> None:
    """Create all tables and seed reference data."""

    op.create_table(
        "categories",
        _id_column(),
        _created_at_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.Index("ix_categories_created_at", "created_at"),
    )

    op.create_table(
        "deities",
        _id_column(),
        _created_at_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sanskrit_name", sa.String(255), nullable=True),
        sa.Column("day_of_week", sa.String(32), nullable=True),
        sa.Column("color", sa.String(64), nullable=True),
        sa.Column("gemstone", sa.String(64), nullable=True),
        sa.Column("metal", sa.String(64), nullable=True),
        sa.Column("element", sa.String(64), nullable=True),
        sa.Column("direction", sa.String(64), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.Index("ix_deities_created_at", "created_at"),
        sa.Index("ix_deities_is_active", "is_active"),
    )

    op.create_table(
        "recitation_counts",
        _id_column(),
        _created_at_column(),
        sa.Column("count_value", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("count_value >= 1", name="ck_recitation_counts_count_value_positive"),
        sa.Index("ix_recitation_counts_created_at", "created_at"),
    )

    op.create_table(
        "recitation_times",
        _id_column(),
        _created_at_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_recitation_times_created_at", "created_at"),
    )

    op.create_table(
        "kalams",
        _id_column(),
        _created_at_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("planet", sa.String(64), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_auspicious", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_kalams_created_at", "created_at"),
    )

    op.create_table(
        "time_ranges",
        _id_column(),
        _created_at_column(),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_time_ranges_created_at", "created_at"),
    )

    op.create_table(
        "mantras",
        _id_column(),
        _created_at_column(),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("category_id", sa.Uuid(), nullable=True),
        sa.Column("deity_id", sa.Uuid(), nullable=True),
        sa.Column("count_id", sa.Uuid(), nullable=True),
        sa.Column("time_id", sa.Uuid(), nullable=True),
        sa.Column("kalam_id", sa.Uuid(), nullable=True),
        sa.Column("range_id", sa.Uuid(), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["deity_id"], ["deities.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["count_id"], ["recitation_counts.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["time_id"], ["recitation_times.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["kalam_id"], ["kalams.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["range_id"], ["time_ranges.id"], ondelete="SET NULL"),
        sa.Index("ix_mantras_created_at", "created_at"),
        sa.Index("ix_mantras_title", "title"),
        sa.Index("ix_mantras_category_id", "category_id"),
        sa.Index("ix_mantras_deity_id", "deity_id"),
        sa.Index("ix_mantras_time_id", "time_id"),
        sa.Index("ix_mantras_kalam_id", "kalam_id"),
        sa.Index("ix_mantras_view_count", "view_count"),
    )

    op.create_table(
        "languages",
        _id_column(),
        _created_at_column(),
        sa.Column("code", sa.String(16), nullable=False),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("native_name", sa.String(128), nullable=True),
        sa.Column("direction", sa.String(3), nullable=False, server_default="ltr"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
        sa.Index("ix_languages_created_at", "created_at"),
        sa.Index("ix_languages_is_active", "is_active"),
        sa.Index("ix_languages_sort_order", "sort_order"),
    )

    op.create_table(
        "mantra_translations",
        _id_column(),
        _created_at_column(),
        sa.Column("mantra_id", sa.Uuid(), nullable=False),
        sa.Column("language_id", sa.Uuid(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("transliteration", sa.Text(), nullable=True),
        sa.Column("pronunciation_guide", sa.Text(), nullable=True),
        sa.Column("meaning", sa.Text(), nullable=True),
        sa.Column("benefits", sa.JSON(), nullable=False),
        sa.Column("usage_notes", sa.Text(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["mantra_id"], ["mantras.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["language_id"], ["languages.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("mantra_id", "language_id", name="uq_mantra_translations_mantra_language"),
        sa.Index("ix_mantra_translations_created_at", "created_at"),
        sa.Index("ix_mantra_translations_mantra_id", "mantra_id"),
        sa.Index("ix_mantra_translations_language_id", "language_id"),
    )

    op.create_table(
        "profiles",
        _id_column(),
        _created_at_column(),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("role", sa.String(32), nullable=False, server_default="user"),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.Index("ix_profiles_created_at", "created_at"),
    )

    # Full-text search index; the expression must match MantraRepository.search
    if op.get_context().dialect.name == "postgresql":
        op.execute(
            "CREATE INDEX ix_mantras_fulltext ON mantras USING GIN "
            "(to_tsvector('english', coalesce(title, '') || ' ' || coalesce(text, '')))"
        )

    _seed_reference_data()


def _seed_reference_data() -> None:
    now = datetime.now(timezone.utc)

    languages = sa.table(
        "languages",
        sa.column("id", sa.Uuid()),
        sa.column("created_at", sa.DateTime(timezone=True)),
        sa.column("code", sa.String()),
        sa.column("name", sa.String()),
        sa.column("native_name", sa.String()),
        sa.column("direction", sa.String()),
        sa.column("is_active", sa.Boolean()),
        sa.column("sort_order", sa.Integer()),
    )
    default_languages = [
        ("en", "English", "English"),
        ("ta", "Tamil", "தமிழ்"),
        ("hi", "Hindi", "हिन्दी"),
        ("sa", "Sanskrit", "संस्कृतम्"),
        ("te", "Telugu", "తెలుగు"),
        ("kn", "Kannada", "ಕನ್ನಡ"),
        ("ml", "Malayalam", "മലയാളം"),
    ]
    op.bulk_insert(
        languages,
        [
            {
                "id": uuid.uuid4(),
                "created_at": now,
                "code": code,
                "name": name,
                "native_name": native_name,
                "direction": "ltr",
                "is_active": True,
                "sort_order": position,
            }
            for position, (code, name, native_name) in enumerate(default_languages)
        ],
    )

    recitation_counts = sa.table(
        "recitation_counts",
        sa.column("id", sa.Uuid()),
        sa.column("created_at", sa.DateTime(timezone=True)),
        sa.column("count_value", sa.Integer()),
        sa.column("description", sa.Text()),
    )
    default_counts = [
        (11, "Short daily practice"),
        (21, "Extended daily practice"),
        (27, "One round per nakshatra"),
        (54, "Half mala"),
        (108, "One full mala"),
        (1008, "Sahasra japa for special occasions"),
    ]
    op.bulk_insert(
        recitation_counts,
        [
            {"id": uuid.uuid4(), "created_at": now, "count_value": value, "description": description}
            for value, description in default_counts
        ],
    )

    recitation_times = sa.table(
        "recitation_times",
        sa.column("id", sa.Uuid()),
        sa.column("created_at", sa.DateTime(timezone=True)),
        sa.column("name", sa.String()),
        sa.column("description", sa.Text()),
    )
    default_times = [
        ("Brahma Muhurta", "About 96 minutes before sunrise"),
        ("Morning", "After sunrise"),
        ("Noon", "Around midday"),
        ("Evening", "Around sunset (sandhya)"),
        ("Night", "After sunset"),
    ]
    op.bulk_insert(
        recitation_times,
        [
            {"id": uuid.uuid4(), "created_at": now, "name": name, "description": description}
            for name, description in default_times
        ],
    )

    kalams = sa.table(
        "kalams",
        sa.column("id", sa.Uuid()),
        sa.column("created_at", sa.DateTime(timezone=True)),
        sa.column("name", sa.String()),
        sa.column("planet", sa.String()),
        sa.column("description", sa.Text()),
        sa.column("is_auspicious", sa.Boolean()),
    )
    default_kalams = [
        ("Rahu Kalam", "Rahu", "Period ruled by Rahu; avoided for new beginnings", False),
        ("Yama Kalam", "Jupiter", "Yamagandam; avoided for auspicious work", False),
        ("Gulika Kalam", "Saturn", "Period ruled by Gulika", False),
        ("Abhijit Muhurta", "Sun", "Midday window considered auspicious", True),
        ("Brahma Muhurta", None, "Pre-dawn window favoured for meditation and japa", True),
    ]
    op.bulk_insert(
        kalams,
        [
            {
                "id": uuid.uuid4(),
                "created_at": now,
                "name": name,
                "planet": planet,
                "description": description,
                "is_auspicious": auspicious,
            }
            for name, planet, description, auspicious in default_kalams
        ],
    )


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.execute("DROP INDEX IF EXISTS ix_mantras_fulltext")
    op.drop_table("profiles")
    op.drop_table("mantra_translations")
    op.drop_table("languages")
    op.drop_table("mantras")
    op.drop_table("time_ranges")
    op.drop_table("kalams")
    op.drop_table("recitation_times")
    op.drop_table("recitation_counts")
    op.drop_table("deities")
    op.drop_table("categories")
