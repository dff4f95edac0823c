from autoinject.boxes import AutoInjected, WeakAutoInjected
from autoinject.defaults import (
    DEFAULT_LEAF_TYPES,
    DEFAULT_MAX_RESOLUTION_DEPTH,
    DEFAULT_MISSING_DEPENDENCY_ERRORS,
)
from autoinject.exceptions import (
    AutoInjectDepthError,
    AutoInjectError,
    AutoInjectRequiredValueError,
    AutoInjectWeakReferenceError,
)
from autoinject.injector import AutoInjector, inject
from autoinject.protocols import AutoInjectable, SupportsResolve

__all__ = [
    "DEFAULT_LEAF_TYPES",
    "DEFAULT_MAX_RESOLUTION_DEPTH",
    "DEFAULT_MISSING_DEPENDENCY_ERRORS",
    "AutoInjectDepthError",
    "AutoInjectError",
    "AutoInjectRequiredValueError",
    "AutoInjectWeakReferenceError",
    "AutoInjectable",
    "AutoInjected",
    "AutoInjector",
    "SupportsResolve",
    "WeakAutoInjected",
    "inject",
]
