"""Adapters Django (driving e driven)."""
