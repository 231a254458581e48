"""Infrastructure layer: HTTP integrations, observability and app lifecycle."""
