"""Infrastructure adapters: logging, route sources, schema conversion."""
