"""Settings sections, one BaseSettings class per concern."""
