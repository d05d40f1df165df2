"""Utility helpers for Skanzer."""

from .naming import sanitize_output_name

__all__ = ["sanitize_output_name"]
