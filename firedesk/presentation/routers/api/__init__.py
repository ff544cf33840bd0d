"""Versioned API routers and their dependencies."""
