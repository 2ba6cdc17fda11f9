"""
Domain layer.

Pure business logic with no framework or persistence dependencies.
"""
