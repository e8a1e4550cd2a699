"""Core layer: configuration, enums, errors and the dependency container."""
