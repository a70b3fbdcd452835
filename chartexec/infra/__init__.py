"""Infrastructure helpers: configuration and locking."""
