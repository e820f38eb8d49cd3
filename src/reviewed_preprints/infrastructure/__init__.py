"""Infrastructure layer - external service clients."""
