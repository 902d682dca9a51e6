"""Infrastructure layer: adapters and their configuration."""
