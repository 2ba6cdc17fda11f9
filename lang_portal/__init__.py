"""Vocabulary study tracking: sessions, reviews and derived analytics."""

__version__ = "0.1.0"
