"""Runtime member dispatch for dynamic (expando) objects.

An object is dynamic when its members are not declared by its type:

1. it implements ``get_dynamic_member_names()`` and ``get_dynamic_member(name)``
2. it is a ``types.SimpleNamespace``
3. it is a ``collections.abc.Mapping`` (string keys are its members)
4. its type overrides ``__getattr__``

For (2) and (4) the live members are the public instance attributes the type
does not declare. Types overriding ``__dir__`` advertise their members through
``dir()`` instead of the instance dictionary.
"""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from typing import Any, List

from ..access_models import require_target
from .protocols import DynamicMetaObject

logger = logging.getLogger(__name__)


def _implements_protocol(cls: type) -> bool:
    # checked on the type so instance __getattr__ cannot fake the methods
    return isinstance(cls, DynamicMetaObject)


def _overrides(cls: type, name: str) -> bool:
    for klass in cls.__mro__:
        if klass is object:
            return False
        if name in vars(klass):
            return True
    return False


def _is_runtime_member(cls: type, name: str) -> bool:
    return not name.startswith("_") and not hasattr(cls, name)


def _runtime_attribute_names(obj: Any) -> List[str]:
    cls = type(obj)
    if _overrides(cls, "__dir__"):
        candidates = list(dir(obj))
    else:
        candidates = list(getattr(obj, "__dict__", {}))
    return [name for name in candidates if _is_runtime_member(cls, name)]


class DynamicMemberProvider:
    """Lists and reads members of dynamic objects."""

    def is_dynamic(self, obj: Any) -> bool:
        if obj is None:
            return False
        cls = type(obj)
        if _implements_protocol(cls):
            return True
        if isinstance(obj, (types.SimpleNamespace, Mapping)):
            return True
        return _overrides(cls, "__getattr__")

    def list_member_names(self, obj: Any) -> List[str]:
        require_target(obj)
        if _implements_protocol(type(obj)):
            return list(obj.get_dynamic_member_names())
        if isinstance(obj, Mapping):
            return [key for key in obj.keys() if isinstance(key, str)]
        return _runtime_attribute_names(obj)

    def invoke_get(self, obj: Any, name: str) -> Any:
        require_target(obj)
        if _implements_protocol(type(obj)):
            return obj.get_dynamic_member(name)
        if isinstance(obj, Mapping):
            return obj[name]
        if not _is_runtime_member(type(obj), name):
            raise AttributeError(f"{type(obj).__qualname__!r} has no dynamic member {name!r}")
        return getattr(obj, name)

    def try_invoke_get(self, obj: Any, name: str, missing: Any) -> Any:
        """Read *name*, mapping the dynamic runtime's own miss to *missing*."""
        try:
            return self.invoke_get(obj, name)
        except (AttributeError, KeyError):
            logger.debug("Dynamic member %r not present on %s", name, type(obj).__qualname__)
            return missing


__all__ = ["DynamicMemberProvider"]
