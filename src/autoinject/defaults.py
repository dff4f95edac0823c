import datetime
import decimal
import enum
import logging
import pathlib
import types
import uuid
import weakref
from typing import Any

from diwire import Container
from diwire.exceptions import DIWireDependencyNotRegisteredError

DEFAULT_MISSING_DEPENDENCY_ERRORS: tuple[type[BaseException], ...] = (
    DIWireDependencyNotRegisteredError,
)

DEFAULT_LEAF_TYPES: tuple[type[Any], ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
    memoryview,
    range,
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
    weakref.ReferenceType,
    enum.Enum,
    logging.Logger,
    pathlib.PurePath,
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    decimal.Decimal,
    Container,
)

DEFAULT_MAX_RESOLUTION_DEPTH = 1000
