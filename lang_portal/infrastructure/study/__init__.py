"""Study context - Infrastructure layer."""
