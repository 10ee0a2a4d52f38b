"""Shared error types and upstream AI service clients."""
