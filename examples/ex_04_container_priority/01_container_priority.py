"""Resolve from several containers in priority order.

Each box is resolved from the first container that can supply it. A box no
container can supply stays empty without raising.
"""

from __future__ import annotations

from diwire import Container, DependencyRegistrationPolicy, MissingPolicy

from autoinject import AutoInjected, inject


class Settings:
    def __init__(self, source: str) -> None:
        self.source = source


class Mailer:
    pass


class Job:
    def __init__(self) -> None:
        self.settings = AutoInjected(Settings)
        self.mailer = AutoInjected(Mailer, required=False)


def main() -> None:
    overrides = Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )
    defaults = Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )
    defaults.add_instance(Settings(source="defaults"), provides=Settings)

    job = inject(Job(), [overrides, defaults])
    print(f"settings={job.settings.value.source}")  # => settings=defaults
    print(f"mailer={job.mailer.value}")  # => mailer=None

    overrides.add_instance(Settings(source="overrides"), provides=Settings)
    job = inject(Job(), [overrides, defaults])
    print(f"settings={job.settings.value.source}")  # => settings=overrides


if __name__ == "__main__":
    main()
