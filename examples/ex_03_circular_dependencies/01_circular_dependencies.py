"""Break a circular dependency with a weak box.

``Client`` owns its ``Service`` strongly while ``Service`` only observes its
``Client``. The injector walks every object at most once per call, so the
back-link resolves to the client already being injected and the walk stops
there. The weak side keeps the pair from holding each other alive.
"""

from __future__ import annotations

from diwire import Container, DependencyRegistrationPolicy, MissingPolicy

from autoinject import AutoInjected, WeakAutoInjected, inject


class Service:
    def __init__(self) -> None:
        self.client = WeakAutoInjected(Client)


class Client:
    def __init__(self) -> None:
        self.service = AutoInjected(Service)


def main() -> None:
    client = Client()
    service = Service()

    container = Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )
    container.add_instance(client, provides=Client)
    container.add_instance(service, provides=Service)

    inject(client, [container])

    print(f"linked={client.service.value is service}")  # => linked=True
    print(f"back_linked={service.client.value is client}")  # => back_linked=True

    unowned = service.client.with_value(Client())
    print(f"unowned_alive={unowned.value is not None}")  # => unowned_alive=False


if __name__ == "__main__":
    main()
