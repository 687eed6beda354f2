"""curl-lite core: domain, settings and pure services."""

__version__ = "0.1.0"
