"""Domain types for the contacts service."""

from .contact import Contact

__all__ = ["Contact"]
