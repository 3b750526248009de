"""Shared infrastructure: configuration, storage, events, logging and the CLI."""
