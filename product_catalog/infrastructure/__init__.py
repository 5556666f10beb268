"""Infrastructure layer - configuration and logging."""
