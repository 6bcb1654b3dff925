"""Infrastructure layer implementations."""

from salonstock.infrastructure import storage

__all__ = ["storage"]
