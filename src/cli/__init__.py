"""Terminal layer: Typer commands, Rich rendering and validated prompts."""
