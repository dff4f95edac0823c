"""Quickstart: populate auto-injected attributes of an existing object.

Declare attributes as ``AutoInjected`` boxes, register their values in a
diwire container, and let ``inject`` fill the whole graph, including boxes
inside the values it resolves.
"""

from __future__ import annotations

from diwire import Container, DependencyRegistrationPolicy, MissingPolicy

from autoinject import AutoInjected, inject


class Database:
    def __init__(self, host: str) -> None:
        self.host = host


class UserRepository:
    def __init__(self) -> None:
        self.database = AutoInjected(Database)


def announce(repository: UserRepository) -> None:
    print(f"injected={type(repository).__name__}")  # => injected=UserRepository


class UserService:
    def __init__(self) -> None:
        self.repository = AutoInjected(UserRepository, on_inject=announce)


def main() -> None:
    container = Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )
    container.add_instance(Database(host="localhost"), provides=Database)
    container.add_instance(UserRepository(), provides=UserRepository)

    service = inject(UserService(), [container])

    repository = service.repository.value
    assert repository is not None
    database = repository.database.value
    assert database is not None
    print(f"db_host={database.host}")  # => db_host=localhost


if __name__ == "__main__":
    main()
