"""Songbook command-line interface."""
