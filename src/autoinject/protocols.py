from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class SupportsResolve(Protocol):
    """Protocol for a container that property boxes resolve values from.

    ``diwire.Container`` and every resolver returned by
    ``Container.enter_scope()`` satisfy it.
    """

    def resolve(self, dependency: Any) -> Any:
        """Resolve the given dependency key and return its instance.

        Args:
            dependency: Dependency key to resolve.

        """


@runtime_checkable
class AutoInjectable(Protocol):
    """Capability shared by every property box the injector can populate.

    The injector only talks to boxes through this protocol, so it never needs
    to know the concrete wrapped type of a box.
    """

    wrapped_type: Any

    def resolve(
        self,
        container: SupportsResolve,
        *,
        tag: object | None = None,
        missing_errors: tuple[type[BaseException], ...] = (),
    ) -> bool:
        """Resolve and store a value for the box from ``container``.

        Args:
            container: Container asked for the wrapped type.
            tag: Component name in effect for boxes without a name override.
            missing_errors: Exception types meaning the container cannot supply
                the dependency.

        Returns:
            True when a value was stored.

        """

    def current_value(self) -> object | None:
        """Return the stored value with its static type erased."""
