"""Static type metadata: the properties a class declares.

Python has no single property table per type, so the scan collects every
public, instance-level accessor a class exposes:

- dataclass fields (writable unless the dataclass is frozen)
- ``property`` objects
- ``functools.cached_property`` objects (read-only here)
- ``__slots__`` member descriptors
- getset descriptors of C-level types (``date.year``)
- other data descriptors (objects defining ``__set__`` or ``__delete__``)

Names starting with an underscore are never reported.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import logging
import types
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple

from ..access_models import require_target

logger = logging.getLogger(__name__)

Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]


@dataclass(frozen=True)
class StaticPropertyInfo:
    """One declared property of a type."""

    name: str
    getter: Optional[Getter] = None
    setter: Optional[Setter] = None
    declaring_type: Optional[type] = None

    @property
    def has_getter(self) -> bool:
        return self.getter is not None

    @property
    def has_setter(self) -> bool:
        return self.setter is not None

    def invoke_get(self, obj: Any) -> Any:
        if self.getter is None:
            raise AttributeError(f"property {self.name!r} has no getter")
        return self.getter(obj)

    def invoke_set(self, obj: Any, value: Any) -> None:
        if self.setter is None:
            raise AttributeError(f"property {self.name!r} has no setter")
        self.setter(obj, value)


def _attribute_getter(name: str) -> Getter:
    def _get(obj: Any) -> Any:
        return getattr(obj, name)

    return _get


def _attribute_setter(name: str) -> Setter:
    def _set(obj: Any, value: Any) -> None:
        setattr(obj, name, value)

    return _set


def _descriptor_getter(descriptor: Any) -> Getter:
    def _get(obj: Any) -> Any:
        return descriptor.__get__(obj, type(obj))

    return _get


def _descriptor_setter(descriptor: Any) -> Setter:
    def _set(obj: Any, value: Any) -> None:
        descriptor.__set__(obj, value)

    return _set


def _is_public(name: str) -> bool:
    return bool(name) and not name.startswith("_")


def _dataclass_properties(cls: type) -> Iterator[StaticPropertyInfo]:
    if not dataclasses.is_dataclass(cls):
        return
    frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    for field in dataclasses.fields(cls):
        if not _is_public(field.name):
            continue
        setter = None if frozen else _attribute_setter(field.name)
        yield StaticPropertyInfo(field.name, _attribute_getter(field.name), setter, cls)


def _class_dict_property(klass: type, name: str, attr: Any) -> Optional[StaticPropertyInfo]:
    """Translate one class-dictionary entry into property metadata."""
    if isinstance(attr, property):
        getter = attr.fget
        setter = attr.fset
        return StaticPropertyInfo(name, getter, setter, klass)
    if isinstance(attr, functools.cached_property):
        return StaticPropertyInfo(name, _descriptor_getter(attr), None, klass)
    if isinstance(attr, (types.MemberDescriptorType, types.GetSetDescriptorType)):
        return StaticPropertyInfo(name, _descriptor_getter(attr), _descriptor_setter(attr), klass)
    if inspect.isdatadescriptor(attr):
        kind = type(attr)
        getter = _descriptor_getter(attr) if hasattr(kind, "__get__") else None
        setter = _descriptor_setter(attr) if hasattr(kind, "__set__") else None
        return StaticPropertyInfo(name, getter, setter, klass)
    return None


class TypeMetadataProvider:
    """Lists the declared properties of a type in declaration order.

    Dataclass fields come first, then class dictionaries from the most derived
    class to the least derived. A name declared by a more derived class hides
    any base declaration of the same name.
    """

    def list_properties(self, cls: type) -> Tuple[StaticPropertyInfo, ...]:
        require_target(cls, "type")
        seen: set[str] = set()
        collected: list[StaticPropertyInfo] = []

        for info in _dataclass_properties(cls):
            seen.add(info.name)
            collected.append(info)

        for klass in cls.__mro__:
            if klass is object:
                continue
            for name, attr in vars(klass).items():
                if not _is_public(name) or name in seen:
                    continue
                # any attribute shadows base declarations, property or not
                seen.add(name)
                info = _class_dict_property(klass, name, attr)
                if info is not None:
                    collected.append(info)

        logger.debug("Scanned %d properties on %s", len(collected), cls.__qualname__)
        return tuple(collected)


__all__ = ["Getter", "Setter", "StaticPropertyInfo", "TypeMetadataProvider"]
