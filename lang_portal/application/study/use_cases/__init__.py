"""Study use cases."""
