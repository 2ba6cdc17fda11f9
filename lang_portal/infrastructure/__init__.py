"""
Infrastructure layer.

SQLAlchemy-backed implementations of the application protocols, ORM to
domain mappers and the static activity catalog.
"""
