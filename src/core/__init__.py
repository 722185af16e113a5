"""Core: animal domain, capabilities, registry and settings. No terminal I/O."""
