from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from autoinject._internal.reflection import iter_children
from autoinject.defaults import (
    DEFAULT_LEAF_TYPES,
    DEFAULT_MAX_RESOLUTION_DEPTH,
    DEFAULT_MISSING_DEPENDENCY_ERRORS,
)
from autoinject.exceptions import AutoInjectDepthError
from autoinject.protocols import AutoInjectable, SupportsResolve

T = TypeVar("T")

logger = logging.getLogger(__name__)


class AutoInjector:
    """Populate property boxes reachable from an object graph.

    The injector walks the attributes of a target object. Every
    ``AutoInjectable`` box it meets is resolved against the containers in
    order, and the first container that supplies a value wins. The value a box
    holds after resolving, strong or weak, is walked in turn, so nested
    auto-injected graphs are populated in one call. Plain attributes,
    collections and slotted objects are walked as well, reaching boxes at any
    depth. The walk uses an explicit stack, so long chains of objects do not
    hit the interpreter recursion limit.

    Unresolved boxes are left empty. Required-ness is enforced by the boxes,
    never by the injector.

    Each object is walked at most once per ``inject`` call. Two strong boxes
    whose containers build fresh instances of each other on every resolve never
    revisit an object; such chains stop with ``AutoInjectDepthError`` once
    ``max_resolution_depth`` boxes were resolved through each other.

    Examples:
        .. code-block:: python

            injector = AutoInjector([request_resolver, container])
            client = injector.inject(Client())

            client = Client() | AutoInjector([container])

    """

    def __init__(
        self,
        containers: Iterable[SupportsResolve],
        *,
        tag: object | None = None,
        missing_errors: tuple[type[BaseException], ...] = DEFAULT_MISSING_DEPENDENCY_ERRORS,
        leaf_types: tuple[type[Any], ...] = DEFAULT_LEAF_TYPES,
        max_resolution_depth: int = DEFAULT_MAX_RESOLUTION_DEPTH,
    ) -> None:
        """Bind the injector to an ordered list of containers.

        Args:
            containers: Containers tried in order for every box.
            tag: Component name in effect for boxes declared without their own
                ``component``. Such boxes fall back to the plain type when the
                tagged key is missing.
            missing_errors: Exception types meaning a container can not supply
                a dependency. Other container errors propagate.
            leaf_types: Types whose instances are never walked.
            max_resolution_depth: Maximum number of boxes resolved through each
                other along one path before ``AutoInjectDepthError`` is raised.

        """
        self.containers: tuple[SupportsResolve, ...] = tuple(containers)
        self.tag = tag
        self.missing_errors = missing_errors
        self.leaf_types = leaf_types
        self.max_resolution_depth = max_resolution_depth

    def inject(self, target: T) -> T:
        """Resolve every box reachable from ``target`` and return ``target``.

        Args:
            target: Root of the object graph to populate.

        Returns:
            The same ``target`` object, for chaining.

        Raises:
            AutoInjectDepthError: If more than ``max_resolution_depth`` boxes
                were resolved through each other along one path.

        """
        # Holding each walked object keeps its id unique for the rest of the pass.
        visited: dict[int, object] = {}
        pending: list[tuple[object, int]] = [(target, 0)]
        while pending:
            value, depth = pending.pop()
            if self._is_leaf(value) or id(value) in visited:
                continue
            visited[id(value)] = value

            children: list[tuple[object, int]] = []
            for label, child in iter_children(value):
                if not isinstance(child, AutoInjectable):
                    children.append((child, depth))
                    continue
                resolved = self._inject_box(label, child, depth=depth)
                if resolved is not None:
                    children.append((resolved, depth + 1))
            pending.extend(reversed(children))
        return target

    def __ror__(self, target: T) -> T:
        """Support ``target | injector`` as a shorthand for ``injector.inject(target)``."""
        return self.inject(target)

    def _inject_box(self, label: str, box: AutoInjectable, *, depth: int) -> object | None:
        for index, container in enumerate(self.containers):
            if not box.resolve(container, tag=self.tag, missing_errors=self.missing_errors):
                continue

            logger.debug(
                "Injected %r into '%s' from container #%d",
                box.wrapped_type,
                label,
                index,
            )
            resolved = box.current_value()
            if resolved is not None and depth >= self.max_resolution_depth:
                raise AutoInjectDepthError(box.wrapped_type, self.max_resolution_depth)
            return resolved

        logger.debug("No container resolved %r for '%s'", box.wrapped_type, label)
        return None

    def _is_leaf(self, value: object) -> bool:
        if isinstance(value, self.leaf_types):
            return True
        return any(value is container for container in self.containers)


def inject(
    target: T,
    containers: Iterable[SupportsResolve],
    *,
    tag: object | None = None,
) -> T:
    """Inject ``target`` from ``containers`` and return it.

    Shorthand for ``AutoInjector(containers, tag=tag).inject(target)`` that
    keeps construction and injection in one expression.

    Args:
        target: Root of the object graph to populate.
        containers: Containers tried in order for every box.
        tag: Component name in effect for boxes without their own component.

    Returns:
        The same ``target`` object.

    Examples:
        .. code-block:: python

            client = inject(Client(), [container])

    """
    return AutoInjector(containers, tag=tag).inject(target)


__all__ = ["AutoInjector", "inject"]
