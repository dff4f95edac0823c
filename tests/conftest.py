"""Shared pytest fixtures for autoinject tests."""

import pytest
from diwire import Container, DependencyRegistrationPolicy, MissingPolicy


@pytest.fixture()
def container() -> Container:
    """Strict container: every dependency must be registered explicitly."""
    return Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )


@pytest.fixture()
def fallback_container() -> Container:
    """Second strict container, used for priority-order scenarios."""
    return Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )
