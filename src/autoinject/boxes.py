from __future__ import annotations

import logging
import weakref
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from autoinject._internal.keys import build_dependency_key
from autoinject.defaults import DEFAULT_MISSING_DEPENDENCY_ERRORS
from autoinject.exceptions import AutoInjectRequiredValueError, AutoInjectWeakReferenceError

if TYPE_CHECKING:
    from typing_extensions import Self

    from autoinject.protocols import SupportsResolve

T = TypeVar("T")

logger = logging.getLogger(__name__)

_COMPONENT_NOT_SET: Any = object()


def _do_nothing(_value: Any) -> None:
    return None


class _AutoInjectedBox(Generic[T]):
    """Shared configuration and lookup logic of the property box variants."""

    def __init__(
        self,
        wrapped_type: Any,
        *,
        required: bool = True,
        component: object | None = _COMPONENT_NOT_SET,
        on_inject: Callable[[T], None] | None = None,
    ) -> None:
        self.wrapped_type = wrapped_type
        self.required = required
        self.name_overrides_tag = component is not _COMPONENT_NOT_SET
        self.component = None if component is _COMPONENT_NOT_SET else component
        self.on_inject: Callable[[T], None] = on_inject if on_inject is not None else _do_nothing

    def _lookup(
        self,
        container: SupportsResolve,
        *,
        tag: object | None,
        missing_errors: tuple[type[BaseException], ...],
    ) -> T | None:
        if self.name_overrides_tag:
            key = build_dependency_key(self.wrapped_type, self.component)
            return _resolve_or_none(container, key, missing_errors)

        if tag is not None:
            resolved = _resolve_or_none(
                container,
                build_dependency_key(self.wrapped_type, tag),
                missing_errors,
            )
            if resolved is not None:
                return resolved

        return _resolve_or_none(container, self.wrapped_type, missing_errors)

    def _clone(self) -> Self:
        if self.name_overrides_tag:
            return type(self)(
                self.wrapped_type,
                required=self.required,
                component=self.component,
                on_inject=self.on_inject,
            )
        return type(self)(self.wrapped_type, required=self.required, on_inject=self.on_inject)

    def __repr__(self) -> str:
        parts = [repr(self.wrapped_type), f"required={self.required}"]
        if self.name_overrides_tag:
            parts.append(f"component={self.component!r}")
        parts.append(f"value={self.current_value()!r}")
        return f"{type(self).__name__}({', '.join(parts)})"

    def current_value(self) -> object | None:  # pragma: no cover - overridden
        raise NotImplementedError


class AutoInjected(_AutoInjectedBox[T]):
    """Mark a *strong* attribute of an instance for auto-injection.

    The box owns the resolved value. Declare it with an initial box instance
    rather than as an optional attribute, otherwise the injector has nothing
    to populate.

    Examples:
        .. code-block:: python

            class ClientImpl:
                def __init__(self) -> None:
                    self.service = AutoInjected(Service)
                    self.replica = AutoInjected(Database, component="replica")


            client = inject(ClientImpl(), [container])
            client.service.value.handle()

    """

    def __init__(
        self,
        wrapped_type: Any,
        *,
        required: bool = True,
        component: object | None = _COMPONENT_NOT_SET,
        on_inject: Callable[[T], None] | None = None,
    ) -> None:
        """Create an empty box for an auto-injected attribute.

        Args:
            wrapped_type: Dependency key requested from the container, usually
                the attribute's type.
            required: Whether the owning object needs this value to work. An
                unresolved required box is not an injection error; later use
                of the absent value is.
            component: Component name used instead of the tag in effect. Pass
                ``None`` explicitly to always resolve the plain type.
            on_inject: Callback invoked with the value each time a new value is
                stored. Similar to a property setter hook.

        """
        super().__init__(
            wrapped_type,
            required=required,
            component=component,
            on_inject=on_inject,
        )
        self._value: T | None = None

    @property
    def value(self) -> T | None:
        """Return the wrapped value, or ``None`` while unresolved."""
        return self._value

    def resolve(
        self,
        container: SupportsResolve,
        *,
        tag: object | None = None,
        missing_errors: tuple[type[BaseException], ...] = DEFAULT_MISSING_DEPENDENCY_ERRORS,
    ) -> bool:
        """Resolve the wrapped type from ``container`` and store the result.

        Args:
            container: Container asked for the wrapped type.
            tag: Component name in effect. Ignored when the box carries its
                own ``component``.
            missing_errors: Exception types meaning the container cannot
                supply the dependency.

        Returns:
            True when a value was stored.

        """
        self._store(self._lookup(container, tag=tag, missing_errors=missing_errors))
        return self._value is not None

    def current_value(self) -> object | None:
        """Return the stored value with its static type erased."""
        return self._value

    def with_value(self, value: T | None) -> AutoInjected[T]:
        """Return a new box with the same configuration holding ``value``.

        Args:
            value: Value to hold. The callback is not invoked for it.

        Raises:
            AutoInjectRequiredValueError: If the box is required and ``value``
                is ``None``.

        """
        if self.required and value is None:
            msg = f"Can not set required property of type {self.wrapped_type!r} to None."
            raise AutoInjectRequiredValueError(msg)

        box = self._clone()
        box._value = value
        return box

    def _store(self, value: T | None) -> None:
        previous = self._value
        self._value = value
        if value is not None and value is not previous:
            self.on_inject(value)


class WeakAutoInjected(_AutoInjectedBox[T]):
    """Mark a *weak* attribute of an instance for auto-injection.

    The only difference from ``AutoInjected`` is that the value is held through
    ``weakref.ref``. Use it for one side of two circular dependencies whose
    other side is an ``AutoInjected`` box, so the pair does not keep itself
    alive and injection does not loop.

    If nothing else holds the resolved instance, it is released as soon as
    ``resolve`` returns and ``value`` reads ``None``.

    Examples:
        .. code-block:: python

            class ServiceImpl:
                def __init__(self) -> None:
                    self.client = WeakAutoInjected(Client)

    """

    def __init__(
        self,
        wrapped_type: Any,
        *,
        required: bool = True,
        component: object | None = _COMPONENT_NOT_SET,
        on_inject: Callable[[T], None] | None = None,
    ) -> None:
        """Create an empty box for a weak auto-injected attribute.

        Args:
            wrapped_type: Dependency key requested from the container. Resolved
                values must support weak references.
            required: Whether the owning object needs this value to work.
            component: Component name used instead of the tag in effect.
            on_inject: Callback invoked with the value each time a new value is
                stored.

        """
        super().__init__(
            wrapped_type,
            required=required,
            component=component,
            on_inject=on_inject,
        )
        self._reference: weakref.ref[Any] | None = None

    @property
    def value(self) -> T | None:
        """Return the referenced value, or ``None`` if unresolved or released."""
        if self._reference is None:
            return None
        return self._reference()

    def resolve(
        self,
        container: SupportsResolve,
        *,
        tag: object | None = None,
        missing_errors: tuple[type[BaseException], ...] = DEFAULT_MISSING_DEPENDENCY_ERRORS,
    ) -> bool:
        """Resolve the wrapped type from ``container`` and reference the result.

        Args:
            container: Container asked for the wrapped type.
            tag: Component name in effect. Ignored when the box carries its
                own ``component``.
            missing_errors: Exception types meaning the container cannot
                supply the dependency.

        Returns:
            True when a value is referenced.

        Raises:
            AutoInjectWeakReferenceError: If the box is required and the
                resolved value can not be weakly referenced.

        """
        resolved = self._lookup(container, tag=tag, missing_errors=missing_errors)
        reference = _make_reference(resolved)
        if resolved is not None and reference is None:
            if self.required:
                raise AutoInjectWeakReferenceError(self.wrapped_type, resolved)
            logger.debug(
                "Dropping %s value for optional weak property of %r",
                type(resolved).__qualname__,
                self.wrapped_type,
            )
            resolved = None

        previous = self.value
        self._reference = reference
        if resolved is not None and resolved is not previous:
            self.on_inject(resolved)
        return resolved is not None

    def current_value(self) -> object | None:
        """Return the referenced value with its static type erased."""
        return self.value

    def with_value(self, value: T | None) -> WeakAutoInjected[T]:
        """Return a new box with the same configuration referencing ``value``.

        Args:
            value: Value to reference. The callback is not invoked for it.

        Raises:
            AutoInjectWeakReferenceError: If ``value`` can not be weakly
                referenced.
            AutoInjectRequiredValueError: If the box is required and ``value``
                is ``None``.

        """
        reference = _make_reference(value)
        if value is not None and reference is None:
            raise AutoInjectWeakReferenceError(self.wrapped_type, value)
        if self.required and reference is None:
            msg = f"Can not set required property of type {self.wrapped_type!r} to None."
            raise AutoInjectRequiredValueError(msg)

        box = self._clone()
        box._reference = reference
        return box


def _resolve_or_none(
    container: SupportsResolve,
    key: Any,
    missing_errors: tuple[type[BaseException], ...],
) -> Any:
    try:
        return container.resolve(key)
    except missing_errors:
        logger.debug("Container %r can not resolve %r", container, key)
        return None


def _make_reference(value: object | None) -> weakref.ref[Any] | None:
    if value is None:
        return None
    try:
        return weakref.ref(value)
    except TypeError:
        return None


__all__ = ["AutoInjected", "WeakAutoInjected"]
