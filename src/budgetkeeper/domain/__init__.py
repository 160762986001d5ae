"""Domain layer: repository contracts and read projections."""
