"""Constant tables shared across Skanzer modules."""
