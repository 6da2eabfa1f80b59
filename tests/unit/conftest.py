"""Fixtures for presenter unit tests."""

from __future__ import annotations

import pytest
from sample_models import User, UserPresenter


@pytest.fixture
def user() -> User:
    """Return a transient user with the usual test attributes."""
    return User().fill(first_name="John", last_name="Doe", email="john@example.com")


@pytest.fixture
def presenter(user: User) -> UserPresenter:
    """Return the presenter bound to ``user``."""
    return user.present()
