"""Adapters – concrete remote store and identity integrations."""
