"""
Infrastructure layer configuration.

This package contains configuration for infrastructure components:
- Database connection and session management
- Dependency injection helpers
"""

from app.infrastructure.config.database import DatabaseConfig
from app.infrastructure.config.dependencies import (
    create_memory_uow_dependency,
    create_uow_dependency,
)

__all__ = [
    "DatabaseConfig",
    "create_memory_uow_dependency",
    "create_uow_dependency",
]
