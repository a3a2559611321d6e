"""Adapters around the Songbook domain: catalog files and the CLI."""
