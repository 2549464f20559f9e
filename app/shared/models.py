"""Shared SQLAlchemy model mixins."""

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


class CreatedAtMixin:
    """Mixin adding a server-side creation timestamp.

    Catalog rows are write-once, so there is no ``updated_at`` counterpart.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
