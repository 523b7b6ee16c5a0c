"""Shared helpers: credentials and authorization policy."""
