from __future__ import annotations

from collections.abc import Sequence

import pytest

from autoinject.injector import AutoInjector
from autoinject.protocols import SupportsResolve


@pytest.fixture()
def autoinject_containers() -> Sequence[SupportsResolve]:
    """Fixture hook for the containers used by the ``autoinject`` fixture.

    Users must override this fixture in their own test suite and return the
    containers to resolve property boxes from, in priority order.

    """
    msg = (
        "The autoinject pytest plugin requires overriding the 'autoinject_containers' fixture "
        "in your test suite. Define @pytest.fixture() def autoinject_containers() -> "
        "list[Container]: ... and return configured containers."
    )
    raise RuntimeError(msg)


@pytest.fixture()
def autoinject(autoinject_containers: Sequence[SupportsResolve]) -> AutoInjector:
    """Return an injector bound to the ``autoinject_containers`` fixture.

    Examples:
        .. code-block:: python

            def test_client_uses_service(autoinject: AutoInjector) -> None:
                client = Client() | autoinject
                assert client.service.value is not None

    """
    return AutoInjector(autoinject_containers)
