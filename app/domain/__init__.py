"""Domain layer package.

The domain layer contains pure business logic with zero external dependencies.
It includes entities, value objects and domain exceptions.
"""

__all__ = []
