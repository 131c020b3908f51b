"""Adapters for external systems (configuration, upstream API, web)."""
