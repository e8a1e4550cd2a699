"""Domain layer: protocols shared across the harness."""
