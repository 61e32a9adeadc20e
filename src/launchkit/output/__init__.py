"""Output layer: Rich rendering for CLI listings."""
