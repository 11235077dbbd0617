"""Core primitives: settings, logging setup and error types."""
