"""Application layer: use cases, ports, DTOs and application errors."""
