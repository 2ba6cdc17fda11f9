"""Vocabulary context - Infrastructure layer."""
