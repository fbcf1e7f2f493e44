"""
Metasearch boundary.

Async SearxNG client used by every retrieval focus mode and by media search.
"""

from focusrag.boundary.search.searxng_client import SearxngClient

__all__ = ["SearxngClient"]
