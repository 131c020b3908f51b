"""Domain layer - models, errors and ports."""
