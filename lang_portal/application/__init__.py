"""
Application layer.

Use cases orchestrating the domain through repository protocols. Nothing in
here knows about SQLAlchemy.
"""
