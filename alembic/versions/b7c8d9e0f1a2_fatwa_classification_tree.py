"""Fatwa classification tree and per-language names

Revision ID: b7c8d9e0f1a2
Revises: a1b2c3d4e5f6
Create Date: 2026-10-17 10:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "b7c8d9e0f1a2"
down_revision: Union[str, None] = "a1b2c3d4e5f6"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("fatwa_classifications") as batch_op:
        batch_op.alter_column("name", existing_type=sa.String(), nullable=True)
        batch_op.add_column(sa.Column("parent_id", sa.Integer(), nullable=True))
        batch_op.create_foreign_key(
            "fk_fatwa_classifications_parent_id",
            "fatwa_classifications",
            ["parent_id"],
            ["id"],
            ondelete="SET NULL",
        )
        batch_op.create_index(op.f("ix_fatwa_classifications_parent_id"), ["parent_id"], unique=False)

    op.create_table(
        "fatwa_classification_translations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("classification_id", sa.Integer(), nullable=False),
        sa.Column("language", sa.String(length=10), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["classification_id"], ["fatwa_classifications.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "classification_id", "language", name="uq_fatwa_classification_translation_language"
        ),
    )


def downgrade() -> None:
    op.drop_table("fatwa_classification_translations")
    with op.batch_alter_table("fatwa_classifications") as batch_op:
        batch_op.drop_index(op.f("ix_fatwa_classifications_parent_id"))
        batch_op.drop_constraint("fk_fatwa_classifications_parent_id", type_="foreignkey")
        batch_op.drop_column("parent_id")
        batch_op.alter_column("name", existing_type=sa.String(), nullable=False)
