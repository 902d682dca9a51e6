"""Shared fixtures for currency use case tests."""

from unittest.mock import AsyncMock, Mock

import pytest


@pytest.fixture
def mock_uow():
    """Create a mock Unit of Work."""
    uow = Mock()
    uow.currencies = Mock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)  # Don't suppress exceptions
    return uow
