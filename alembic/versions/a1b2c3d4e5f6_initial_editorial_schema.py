"""Initial editorial schema

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-16 09:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _translation_columns() -> list[sa.Column]:
    return [
        sa.Column("language", sa.String(length=10), nullable=True),
        sa.Column("slug", sa.String(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=True),
        sa.Column("is_original", sa.Boolean(), nullable=True),
        *_timestamps(),
    ]


def _translation_indexes(table: str, group_fk: str) -> None:
    op.create_index(op.f(f"ix_{table}_language"), table, ["language"], unique=False)
    op.create_index(op.f(f"ix_{table}_slug"), table, ["slug"], unique=False)
    op.create_index(op.f(f"ix_{table}_{group_fk}"), table, [group_fk], unique=False)


def _name_translations(table: str, owner_table: str, owner_fk: str) -> None:
    op.create_table(
        table,
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column(owner_fk, sa.Integer(), nullable=False),
        sa.Column("language", sa.String(length=10), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint([owner_fk], [f"{owner_table}.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(owner_fk, "language", name=f"uq_{owner_fk[:-3]}_translation_language"),
    )


def _event_table(table: str, owner_table: str, owner_fk: str, nested: bool) -> None:
    columns = [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(owner_fk, sa.Uuid(), nullable=False),
        sa.Column("article_id", sa.Uuid(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("custom_event_date_hijri", sa.String(), nullable=True),
        sa.Column("custom_event_date_gregorian", sa.String(), nullable=True),
        sa.Column("custom_title", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint([owner_fk], [f"{owner_table}.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["article_id"], ["article_translations.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(owner_fk, "article_id", name=f"uq_{owner_fk[:-3]}_article"),
    ]
    if nested:
        columns.append(sa.Column("parent_id", sa.Uuid(), nullable=True))
        columns.append(sa.ForeignKeyConstraint(["parent_id"], [f"{table}.id"], ondelete="SET NULL"))
    op.create_table(table, *columns)
    op.create_index(op.f(f"ix_{table}_{owner_fk}"), table, [owner_fk], unique=False)


def upgrade() -> None:
    # Reference data
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index(op.f("ix_categories_id"), "categories", ["id"], unique=False)

    op.create_table(
        "classifications",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index(op.f("ix_classifications_id"), "classifications", ["id"], unique=False)
    _name_translations("classification_translations", "classifications", "classification_id")

    op.create_table(
        "types",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("classification_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["classification_id"], ["classifications.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index(op.f("ix_types_id"), "types", ["id"], unique=False)
    _name_translations("type_translations", "types", "type_id")

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index(op.f("ix_tags_id"), "tags", ["id"], unique=False)
    _name_translations("tag_translations", "tags", "tag_id")

    op.create_table(
        "fatwa_classifications",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )
    op.create_index(op.f("ix_fatwa_classifications_id"), "fatwa_classifications", ["id"], unique=False)

    op.create_table(
        "media",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("url", sa.String(), nullable=False),
        sa.Column("file_name", sa.String(), nullable=False),
        sa.Column("mime_type", sa.String(), nullable=True),
        sa.Column("size_bytes", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # Individuals
    op.create_table(
        "individuals",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=True),
        sa.Column("original_name", sa.String(), nullable=True),
        sa.Column("ranking", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["type_id"], ["types.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "individual_translations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("individual_id", sa.Uuid(), nullable=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("biography", sa.Text(), nullable=True),
        sa.Column("birth_date_hijri", sa.String(), nullable=True),
        sa.Column("death_date_hijri", sa.String(), nullable=True),
        sa.Column("type_id", sa.Integer(), nullable=True),
        *_translation_columns(),
        sa.ForeignKeyConstraint(["individual_id"], ["individuals.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("language", "slug", name="uq_individual_translation_slug"),
    )
    _translation_indexes("individual_translations", "individual_id")

    # Articles
    op.create_table(
        "articles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("individual_id", sa.Uuid(), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["individual_id"], ["individuals.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "article_translations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("article_id", sa.Uuid(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("content_json", sa.JSON(), nullable=True),
        sa.Column("is_featured", sa.Boolean(), nullable=True),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("event_date_hijri", sa.String(), nullable=True),
        sa.Column("event_date_hijri_year", sa.Integer(), nullable=True),
        sa.Column("event_date_gregorian", sa.String(), nullable=True),
        sa.Column("event_date_precision", sa.String(length=20), nullable=True),
        *_translation_columns(),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("language", "slug", name="uq_article_translation_slug"),
    )
    _translation_indexes("article_translations", "article_id")

    op.create_table(
        "article_group_tags",
        sa.Column("article_id", sa.Uuid(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("article_id", "tag_id"),
    )
    op.create_table(
        "article_tags",
        sa.Column("article_id", sa.Uuid(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["article_id"], ["article_translations.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("article_id", "tag_id"),
    )
    op.create_table(
        "article_translators",
        sa.Column("article_id", sa.Uuid(), nullable=False),
        sa.Column("individual_id", sa.Uuid(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["article_id"], ["article_translations.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["individual_id"], ["individuals.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("article_id", "individual_id"),
    )
    op.create_table(
        "article_media",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("article_id", sa.Uuid(), nullable=False),
        sa.Column("media_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["article_id"], ["article_translations.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["media_id"], ["media.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("article_id", "media_id", name="uq_article_media"),
    )

    # Fatawa
    op.create_table(
        "fatawa",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column("classification_id", sa.Integer(), nullable=True),
        sa.Column("individual_id", sa.Uuid(), nullable=True),
        sa.Column("source", sa.String(), nullable=True),
        sa.Column("source_url", sa.String(), nullable=True),
        sa.Column("media_id", sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["classification_id"], ["fatwa_classifications.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["individual_id"], ["individuals.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["media_id"], ["media.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "fatwa_translations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("fatwa_id", sa.Uuid(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("question", sa.Text(), nullable=True),
        sa.Column("answer", sa.Text(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column("classification_id", sa.Integer(), nullable=True),
        *_translation_columns(),
        sa.ForeignKeyConstraint(["fatwa_id"], ["fatawa.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("language", "slug", name="uq_fatwa_translation_slug"),
    )
    _translation_indexes("fatwa_translations", "fatwa_id")
    op.create_table(
        "fatwa_group_tags",
        sa.Column("fatwa_id", sa.Uuid(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["fatwa_id"], ["fatawa.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("fatwa_id", "tag_id"),
    )
    op.create_table(
        "fatwa_tags",
        sa.Column("fatwa_id", sa.Uuid(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["fatwa_id"], ["fatwa_translations.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("fatwa_id", "tag_id"),
    )

    # Themes
    op.create_table(
        "themes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "theme_translations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("theme_id", sa.Uuid(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category_id", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        *_translation_columns(),
        sa.ForeignKeyConstraint(["theme_id"], ["themes.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("language", "slug", name="uq_theme_translation_slug"),
    )
    _translation_indexes("theme_translations", "theme_id")
    _event_table("theme_articles", "theme_translations", "theme_id", nested=True)

    # Timelines
    op.create_table(
        "timelines",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "timeline_translations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("timeline_id", sa.Uuid(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        *_translation_columns(),
        sa.ForeignKeyConstraint(["timeline_id"], ["timelines.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("language", "slug", name="uq_timeline_translation_slug"),
    )
    _translation_indexes("timeline_translations", "timeline_id")
    _event_table("timeline_articles", "timeline_translations", "timeline_id", nested=False)

    # Image generator
    op.create_table(
        "image_presets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("prompt_template", sa.Text(), nullable=False),
        sa.Column("style_reference_url", sa.String(), nullable=True),
        sa.Column("width", sa.Integer(), nullable=False),
        sa.Column("height", sa.Integer(), nullable=False),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "image_projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("preset_id", sa.Uuid(), nullable=True),
        sa.Column("width", sa.Integer(), nullable=False),
        sa.Column("height", sa.Integer(), nullable=False),
        sa.Column("generation_prompt", sa.Text(), nullable=True),
        sa.Column("style_reference_url", sa.String(), nullable=True),
        sa.Column("background_image_url", sa.String(), nullable=True),
        sa.Column("aspect_ratio", sa.String(length=10), nullable=True),
        sa.Column("person_generation", sa.String(length=20), nullable=False),
        sa.Column("enhance_prompt", sa.Boolean(), nullable=False),
        sa.Column("seed", sa.Integer(), nullable=True),
        sa.Column("image_size", sa.String(length=4), nullable=False),
        sa.Column("ai_model", sa.String(length=30), nullable=False),
        sa.Column("reference_images", sa.JSON(), nullable=False),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["preset_id"], ["image_presets.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "image_project_generations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("media_id", sa.Uuid(), nullable=True),
        sa.Column("prompt", sa.Text(), nullable=True),
        sa.Column("model", sa.String(length=30), nullable=True),
        sa.Column("is_selected", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["project_id"], ["image_projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["media_id"], ["media.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_image_project_generations_project_id"), "image_project_generations", ["project_id"], unique=False
    )


def downgrade() -> None:
    for table in (
        "image_project_generations",
        "image_projects",
        "image_presets",
        "timeline_articles",
        "timeline_translations",
        "timelines",
        "theme_articles",
        "theme_translations",
        "themes",
        "fatwa_tags",
        "fatwa_group_tags",
        "fatwa_translations",
        "fatawa",
        "article_media",
        "article_translators",
        "article_tags",
        "article_group_tags",
        "article_translations",
        "articles",
        "individual_translations",
        "individuals",
        "media",
        "fatwa_classifications",
        "tag_translations",
        "tags",
        "type_translations",
        "types",
        "classification_translations",
        "classifications",
        "categories",
    ):
        op.drop_table(table)
