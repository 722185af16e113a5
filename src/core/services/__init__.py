"""Core services: the session-scoped animal registry."""
