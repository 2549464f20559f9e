"""create_catalog_tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Apply migration - create produto and produto_comprado tables."""
    op.create_table(
        "produto",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("titulo", sa.String(length=200), nullable=False),
        sa.Column("preco", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("descricao", sa.Text(), nullable=True),
        sa.Column("tag", sa.String(length=100), nullable=True),
        sa.Column("image", sa.String(length=500), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("preco >= 0", name="ck_produto_preco_positive"),
    )

    op.create_table(
        "produto_comprado",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("produto_id", sa.Integer(), nullable=True),
        sa.Column("preco_venda", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        # Purchases outlive their product; the reference is cleared instead
        sa.ForeignKeyConstraint(["produto_id"], ["produto.id"], ondelete="SET NULL"),
        sa.CheckConstraint(
            "preco_venda IS NULL OR preco_venda >= 0",
            name="ck_produto_comprado_preco_venda_positive",
        ),
    )
    op.create_index("ix_produto_comprado_date", "produto_comprado", ["date"])
    op.create_index("ix_produto_comprado_produto_id", "produto_comprado", ["produto_id"])


def downgrade() -> None:
    """Revert migration - drop catalog tables."""
    op.drop_index("ix_produto_comprado_produto_id", table_name="produto_comprado")
    op.drop_index("ix_produto_comprado_date", table_name="produto_comprado")
    op.drop_table("produto_comprado")
    op.drop_table("produto")
