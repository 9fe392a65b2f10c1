"""Shared infrastructure: configuration, events, errors, logging."""
