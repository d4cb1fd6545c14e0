"""Shared application helpers: settings and signals."""
