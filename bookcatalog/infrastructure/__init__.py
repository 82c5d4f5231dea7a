"""Infrastructure layer - storage for catalog records."""
