"""Catalog ORM models: products and the purchases recorded against them.

Table and column names keep the Portuguese names used by the public API
(``produto``, ``produto_comprado``); Python attributes are English.
"""

import datetime
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.shared.models import CreatedAtMixin


class Product(CreatedAtMixin, Base):
    """Sellable catalog item.

    Attributes:
        id: Primary key.
        title: Display title.
        price: Current price; purchases copy it when they are recorded.
        description: Free-text description.
        tag: Category label.
        image: Image reference (URL or path).
    """

    __tablename__ = "produto"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column("titulo", String(200))
    price: Mapped[Decimal] = mapped_column("preco", Numeric(10, 2))
    description: Mapped[str | None] = mapped_column("descricao", Text, nullable=True)
    tag: Mapped[str | None] = mapped_column(String(100), nullable=True)
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)

    purchases: Mapped[list["Purchase"]] = relationship(back_populates="product")

    __table_args__ = (CheckConstraint("preco >= 0", name="ck_produto_preco_positive"),)


class Purchase(CreatedAtMixin, Base):
    """A single sale event.

    ``sale_price`` is frozen at creation so historical revenue does not move
    when the product price changes. ``product_id`` becomes NULL if the product
    row is deleted; such purchases stay in the history.

    Attributes:
        id: Primary key.
        date: When the sale happened.
        product_id: Product sold (FK, nullable).
        sale_price: Price charged at sale time.
    """

    __tablename__ = "produto_comprado"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), index=True)
    product_id: Mapped[int | None] = mapped_column(
        "produto_id",
        Integer,
        ForeignKey("produto.id", ondelete="SET NULL"),
        nullable=True,
    )
    sale_price: Mapped[Decimal | None] = mapped_column("preco_venda", Numeric(10, 2), nullable=True)

    product: Mapped["Product | None"] = relationship(back_populates="purchases")

    __table_args__ = (
        Index("ix_produto_comprado_produto_id", "produto_id"),
        CheckConstraint(
            "preco_venda IS NULL OR preco_venda >= 0",
            name="ck_produto_comprado_preco_venda_positive",
        ),
    )
