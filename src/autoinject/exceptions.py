class AutoInjectError(Exception):
    """Represent a base class for all autoinject-specific failures.

    Catch this type when you want to handle any autoinject misuse path without
    matching each concrete exception class individually. Errors raised by the
    underlying container are never wrapped in this type.
    """


class AutoInjectRequiredValueError(AutoInjectError, ValueError):
    """Signal an attempt to force a required property box to an absent value.

    Raised by ``AutoInjected.with_value`` and ``WeakAutoInjected.with_value``
    when the box is ``required`` and the given value is ``None``.

    Typical fixes include passing a real value or declaring the box with
    ``required=False``.
    """


class AutoInjectWeakReferenceError(AutoInjectError, TypeError):
    """Signal a weak property box asked to hold a non weak-referenceable value.

    Raised by ``WeakAutoInjected.resolve`` when a required box receives a value
    such as ``int``, ``str``, ``tuple`` or an instance of a slotted class without
    ``__weakref__``, and by ``WeakAutoInjected.with_value`` for any such value.

    Typical fixes include switching the property to ``AutoInjected`` or adding
    ``"__weakref__"`` to the ``__slots__`` of the resolved class.
    """

    def __init__(self, wrapped_type: object, value: object) -> None:
        self.wrapped_type = wrapped_type
        self.value = value
        super().__init__(
            f"{type(value).__qualname__} value resolved for {wrapped_type!r} can not be weakly "
            "referenced. WeakAutoInjected should be used to wrap only weak-referenceable "
            "class instances.",
        )


class AutoInjectDepthError(AutoInjectError, RecursionError):
    """Signal a chain of resolved property boxes deeper than the injector allows.

    Raised by ``AutoInjector.inject`` when more than ``max_resolution_depth``
    boxes were resolved through each other along one path. This usually means
    two ``AutoInjected`` boxes whose containers build a fresh instance of each
    other on every resolve.

    Typical fixes include declaring one side of the cycle with
    ``WeakAutoInjected``, registering one side as a singleton, or raising
    ``max_resolution_depth`` for legitimately deep graphs.
    """

    def __init__(self, wrapped_type: object, max_depth: int) -> None:
        self.wrapped_type = wrapped_type
        self.max_depth = max_depth
        super().__init__(
            f"Resolving {wrapped_type!r} exceeded the maximum of {max_depth} nested "
            "auto-injected properties. Two AutoInjected properties that produce fresh "
            "instances of each other form a cycle; declare one side with WeakAutoInjected.",
        )
