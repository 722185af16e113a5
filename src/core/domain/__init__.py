"""Domain models and entities.

Pure data structures (Pydantic v2): animal variants and status messages.
The domain knows nothing about prompts, colours or the CLI.
"""
