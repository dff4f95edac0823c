from __future__ import annotations

from typing import Annotated, Any

from diwire import Component


def build_dependency_key(wrapped_type: Any, component: object | None) -> Any:
    """Return the diwire dependency key for ``wrapped_type`` under ``component``.

    Without a component the wrapped type is the key. Otherwise the key is
    ``Annotated[wrapped_type, Component(component)]``, the shape diwire uses
    for named registrations.

    Args:
        wrapped_type: Type requested by a property box.
        component: Component name, or an already-built ``Component`` marker.

    """
    if component is None:
        return wrapped_type
    marker = component if isinstance(component, Component) else Component(component)
    return Annotated[wrapped_type, marker]  # type: ignore[valid-type]


__all__ = ["build_dependency_key"]
