"""Configuration for the review action."""

from .settings import Settings

__all__ = ["Settings"]
