"""CLI layer (Typer + Rich)."""
