"""Shared utilities used across features."""

from app.shared.models import CreatedAtMixin

__all__ = ["CreatedAtMixin"]
