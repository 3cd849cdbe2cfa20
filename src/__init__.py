"""Resume layout tooling."""
