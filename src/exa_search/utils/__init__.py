"""
Utility helpers for Exa Search.
"""
from .logging import configure_logging

__all__ = ["configure_logging"]
