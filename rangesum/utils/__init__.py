"""Shared helpers (logging, file output)."""
