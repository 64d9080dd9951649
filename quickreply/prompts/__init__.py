"""Fixed answer templates."""
