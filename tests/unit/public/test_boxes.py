from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any

import pytest
from diwire import Component
from diwire.exceptions import DIWireDependencyNotRegisteredError

from autoinject import AutoInjectable, AutoInjected, AutoInjectRequiredValueError


class _Service:
    pass


class _ResolverStub:
    def __init__(self, providers: dict[Any, Callable[[], object]] | None = None) -> None:
        self.providers = providers or {}
        self.requested: list[Any] = []

    def resolve(self, dependency: Any) -> Any:
        self.requested.append(dependency)
        try:
            provider = self.providers[dependency]
        except KeyError:
            msg = f"{dependency!r} is not registered"
            raise DIWireDependencyNotRegisteredError(msg) from None
        return provider()


def test_new_box_is_empty_and_required_by_default() -> None:
    box: AutoInjected[_Service] = AutoInjected(_Service)

    assert box.value is None
    assert box.current_value() is None
    assert box.required is True
    assert box.component is None
    assert box.name_overrides_tag is False
    assert isinstance(box, AutoInjectable)


def test_resolve_stores_value_and_fires_callback_once() -> None:
    service = _Service()
    injected: list[_Service] = []
    box: AutoInjected[_Service] = AutoInjected(_Service, on_inject=injected.append)

    assert box.resolve(_ResolverStub({_Service: lambda: service})) is True

    assert box.value is service
    assert box.current_value() is service
    assert injected == [service]


def test_resolving_same_instance_again_does_not_fire_callback() -> None:
    service = _Service()
    injected: list[_Service] = []
    resolver = _ResolverStub({_Service: lambda: service})
    box: AutoInjected[_Service] = AutoInjected(_Service, on_inject=injected.append)

    box.resolve(resolver)
    box.resolve(resolver)

    assert injected == [service]


def test_resolving_different_instance_fires_callback_again() -> None:
    injected: list[_Service] = []
    resolver = _ResolverStub({_Service: _Service})
    box: AutoInjected[_Service] = AutoInjected(_Service, on_inject=injected.append)

    box.resolve(resolver)
    box.resolve(resolver)

    assert len(injected) == 2
    assert injected[0] is not injected[1]
    assert box.value is injected[1]


def test_required_box_stays_empty_when_container_can_not_resolve() -> None:
    injected: list[_Service] = []
    box: AutoInjected[_Service] = AutoInjected(_Service, on_inject=injected.append)

    assert box.resolve(_ResolverStub()) is False

    assert box.value is None
    assert injected == []


def test_container_returning_none_counts_as_unresolved() -> None:
    box: AutoInjected[_Service] = AutoInjected(_Service, required=False)

    assert box.resolve(_ResolverStub({_Service: lambda: None})) is False
    assert box.value is None


def test_unexpected_container_errors_propagate() -> None:
    def broken() -> object:
        msg = "provider exploded"
        raise RuntimeError(msg)

    box: AutoInjected[_Service] = AutoInjected(_Service)

    with pytest.raises(RuntimeError, match="provider exploded"):
        box.resolve(_ResolverStub({_Service: broken}))


def test_custom_missing_errors_are_treated_as_unresolved() -> None:
    class _MappingResolver:
        def resolve(self, dependency: Any) -> Any:
            return {}[dependency]

    box: AutoInjected[_Service] = AutoInjected(_Service)

    assert box.resolve(_MappingResolver(), missing_errors=(KeyError,)) is False


def test_component_overrides_tag_in_effect() -> None:
    replica = _Service()
    resolver = _ResolverStub({Annotated[_Service, Component("replica")]: lambda: replica})
    box: AutoInjected[_Service] = AutoInjected(_Service, component="replica")

    assert box.resolve(resolver, tag="primary") is True

    assert box.value is replica
    assert box.name_overrides_tag is True
    assert resolver.requested == [Annotated[_Service, Component("replica")]]


def test_component_override_does_not_fall_back_to_plain_type() -> None:
    resolver = _ResolverStub({_Service: _Service})
    box: AutoInjected[_Service] = AutoInjected(_Service, component="replica")

    assert box.resolve(resolver) is False
    assert resolver.requested == [Annotated[_Service, Component("replica")]]


def test_explicit_none_component_ignores_tag_in_effect() -> None:
    plain = _Service()
    resolver = _ResolverStub(
        {
            _Service: lambda: plain,
            Annotated[_Service, Component("primary")]: _Service,
        },
    )
    box: AutoInjected[_Service] = AutoInjected(_Service, component=None)

    assert box.resolve(resolver, tag="primary") is True

    assert box.value is plain
    assert box.name_overrides_tag is True


def test_tag_in_effect_is_used_before_plain_type() -> None:
    primary = _Service()
    resolver = _ResolverStub(
        {
            _Service: _Service,
            Annotated[_Service, Component("primary")]: lambda: primary,
        },
    )
    box: AutoInjected[_Service] = AutoInjected(_Service)

    box.resolve(resolver, tag="primary")

    assert box.value is primary


def test_tag_in_effect_falls_back_to_plain_type() -> None:
    plain = _Service()
    resolver = _ResolverStub({_Service: lambda: plain})
    box: AutoInjected[_Service] = AutoInjected(_Service)

    assert box.resolve(resolver, tag="primary") is True

    assert box.value is plain
    assert resolver.requested == [Annotated[_Service, Component("primary")], _Service]


def test_with_value_returns_new_box_with_same_configuration() -> None:
    injected: list[_Service] = []
    service = _Service()
    box: AutoInjected[_Service] = AutoInjected(
        _Service,
        component="replica",
        on_inject=injected.append,
    )

    updated = box.with_value(service)

    assert updated is not box
    assert updated.value is service
    assert box.value is None
    assert updated.component == "replica"
    assert updated.name_overrides_tag is True
    assert updated.required is True
    assert updated.on_inject is box.on_inject
    assert injected == []


def test_with_value_rejects_none_for_required_box() -> None:
    box: AutoInjected[_Service] = AutoInjected(_Service)

    with pytest.raises(AutoInjectRequiredValueError, match="Can not set required property"):
        box.with_value(None)


def test_with_value_accepts_none_for_optional_box() -> None:
    box: AutoInjected[_Service] = AutoInjected(_Service, required=False)

    updated = box.with_value(None)

    assert updated.value is None
    assert updated.required is False
    assert updated.name_overrides_tag is False


def test_repr_mentions_type_configuration_and_value() -> None:
    box: AutoInjected[int] = AutoInjected(int, required=False, component="answer")

    assert repr(box.with_value(42)) == (
        "AutoInjected(<class 'int'>, required=False, component='answer', value=42)"
    )
