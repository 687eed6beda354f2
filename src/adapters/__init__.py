"""I/O adapters (HTTP)."""
