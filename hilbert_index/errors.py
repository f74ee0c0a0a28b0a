"""Exception types."""

from __future__ import annotations


class DomainError(ValueError):
    """Input lies outside the domain on which the curve is defined."""
