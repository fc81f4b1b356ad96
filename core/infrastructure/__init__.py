"""Infrastructure layer - persistence adapters, database lifecycle, event bus and logging."""
