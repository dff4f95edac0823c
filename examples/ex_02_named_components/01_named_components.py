"""Named components and the tag in effect.

A box declared with ``component="..."`` always resolves
``Annotated[T, Component("...")]``. Boxes without a component use the
injector's ``tag`` first and fall back to the plain type.
"""

from __future__ import annotations

from typing import Annotated

from diwire import Component, Container, DependencyRegistrationPolicy, MissingPolicy

from autoinject import AutoInjected, AutoInjector


class Cache:
    def __init__(self, backend: str) -> None:
        self.backend = backend


class Reports:
    def __init__(self) -> None:
        self.cache = AutoInjected(Cache)
        self.fallback = AutoInjected(Cache, component="fallback")


def main() -> None:
    container = Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )
    container.add_instance(Cache(backend="memory"), provides=Cache)
    container.add_instance(Cache(backend="redis"), provides=Annotated[Cache, Component("primary")])
    container.add_instance(Cache(backend="disk"), provides=Annotated[Cache, Component("fallback")])

    plain = AutoInjector([container]).inject(Reports())
    tagged = AutoInjector([container], tag="primary").inject(Reports())

    print(f"plain={plain.cache.value.backend}")  # => plain=memory
    print(f"tagged={tagged.cache.value.backend}")  # => tagged=redis
    print(f"fallback={tagged.fallback.value.backend}")  # => fallback=disk


if __name__ == "__main__":
    main()
