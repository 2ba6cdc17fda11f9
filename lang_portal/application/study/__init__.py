"""Study context - Application layer (session recording, queries, analytics)."""
