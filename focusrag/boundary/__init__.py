"""
Boundary layer for external system integrations.

Handles all interactions with external systems (metasearch, chat and
embedding models). Provides adapters and clients for those dependencies.
"""
