"""Infrastructure layer - storage, repository implementations, configuration and wiring."""
