"""Helpers for building SQL queries: raw expressions, placeholders, blank checks and value conversion."""

__version__ = "0.1.0"