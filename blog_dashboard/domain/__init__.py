"""Serialization helpers shared by exports, the API and the CLI."""
