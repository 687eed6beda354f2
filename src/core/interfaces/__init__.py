"""Core contracts.

Adapters implement these Protocols, so the pipeline depends on abstractions
rather than on httpx.
"""
