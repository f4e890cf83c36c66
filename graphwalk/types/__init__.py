"""Shared type aliases, result containers and error kinds."""
