"""Vocabulary context - Application layer (words, groups, memberships)."""
