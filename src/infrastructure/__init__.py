"""Infrastructure adapters: logging, settings, database access."""
