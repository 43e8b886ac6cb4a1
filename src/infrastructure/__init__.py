"""Infrastructure layer - logging, registries and concrete strategies."""
