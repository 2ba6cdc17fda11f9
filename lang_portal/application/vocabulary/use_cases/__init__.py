"""Vocabulary use cases."""
