"""Domain layer - exceptions shared across the panel."""
