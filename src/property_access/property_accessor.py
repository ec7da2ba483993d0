"""Unified named-property access over static, descriptor and dynamic objects.

Callers pass an object, a property name, a case-sensitivity flag and a
not-found policy; the accessor picks the access path for the object's shape.

Example:
    >>> from types import SimpleNamespace
    >>> get_property(SimpleNamespace(Name="x"), "name", case_sensitive=False)
    'x'
    >>> get_property(SimpleNamespace(), "name", policy=NotFoundPolicy.LENIENT)
    ABSENT
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Iterator, Optional, Union

from .access_models import NotFoundPolicy, PropertyPair, PropertyRequest, Shape, require_name
from .config import AccessorSettings, get_accessor_settings
from .metadata import DescriptorProvider, DynamicMemberProvider, TypeMetadataProvider
from .metadata.protocols import IDescriptorProvider, IDynamicMemberProvider, ITypeMetadataProvider
from .property_accessor_helpers import (
    AccessorCache,
    DescriptorAccessor,
    DynamicAccessor,
    PropertyEnumerator,
    ShapeClassifier,
    StaticAccessor,
    Unresolved,
    handle_unresolved,
)

logger = logging.getLogger(__name__)

PolicyArg = Union[NotFoundPolicy, bool]
Getter = Callable[[Any], Any]


class PropertyAccessor:
    """Coordinates shape classification, per-shape access and getter caching.

    The metadata providers are injectable; everything else is built from
    them. ``settings`` defaults to the environment-driven
    :func:`~property_access.config.get_accessor_settings`.
    """

    def __init__(
        self,
        metadata: Optional[ITypeMetadataProvider] = None,
        descriptors: Optional[IDescriptorProvider] = None,
        dynamic: Optional[IDynamicMemberProvider] = None,
        *,
        cache: Optional[AccessorCache] = None,
        settings: Optional[AccessorSettings] = None,
    ) -> None:
        self.settings = settings if settings is not None else get_accessor_settings()
        metadata = metadata if metadata is not None else TypeMetadataProvider()
        descriptors = descriptors if descriptors is not None else DescriptorProvider()
        dynamic = dynamic if dynamic is not None else DynamicMemberProvider()

        self.classifier = ShapeClassifier(dynamic=dynamic, descriptors=descriptors)
        self.static = StaticAccessor(metadata)
        self.descriptors = DescriptorAccessor(descriptors)
        self.dynamic = DynamicAccessor(dynamic, fast_path=self.settings.dynamic_fast_path)
        self.cache = cache if cache is not None else AccessorCache(self.static, max_entries=self.settings.cache_max_entries)
        self.enumerator = PropertyEnumerator(self.classifier, self.static, self.descriptors, self.dynamic)

    def classify(self, obj: Any) -> Shape:
        return self.classifier.classify(obj)

    def get_property(
        self,
        obj: Any,
        name: str,
        case_sensitive: bool = True,
        policy: PolicyArg = NotFoundPolicy.FAIL,
    ) -> Any:
        """Read *name* from *obj*, returning ``ABSENT`` on a lenient miss."""
        request = PropertyRequest(obj, name, case_sensitive, policy)
        return self._get(request)

    def _get(self, request: PropertyRequest, shape: Optional[Shape] = None) -> Any:
        if shape is None:
            shape = self.classifier.classify(request.target)
        if shape is Shape.DYNAMIC:
            return self.dynamic.get(request.target, request.name, request.case_sensitive, request.policy)
        if shape is Shape.DESCRIPTOR:
            return self.descriptors.get(request.target, request.name, request.case_sensitive, request.policy)
        return self.static.get(request.target, request.name, request.case_sensitive, request.policy)

    def set_property(
        self,
        obj: Any,
        name: str,
        value: Any,
        case_sensitive: bool = True,
        policy: PolicyArg = NotFoundPolicy.FAIL,
    ) -> None:
        """Write *value* to *name* on *obj*.

        Descriptor objects are written through their descriptor list. Dynamic
        objects have no write path of their own and are written through their
        static shape like every other object.
        """
        request = PropertyRequest(obj, name, case_sensitive, policy)
        if self.classifier.classify(obj) is Shape.DESCRIPTOR:
            self.descriptors.set(obj, request.name, value, request.case_sensitive, request.policy)
            return
        self.static.set(obj, request.name, value, request.case_sensitive, request.policy)

    def get_dynamic_property(
        self, obj: Any, name: str, case_sensitive: bool = True, policy: PolicyArg = NotFoundPolicy.FAIL
    ) -> Any:
        """Read through the dynamic path regardless of classification."""
        request = PropertyRequest(obj, name, case_sensitive, policy)
        return self.dynamic.get(obj, request.name, request.case_sensitive, request.policy)

    def get_descriptor_property(
        self, obj: Any, name: str, case_sensitive: bool = True, policy: PolicyArg = NotFoundPolicy.FAIL
    ) -> Any:
        """Read through the descriptor path regardless of classification."""
        request = PropertyRequest(obj, name, case_sensitive, policy)
        return self.descriptors.get(obj, request.name, request.case_sensitive, request.policy)

    def set_descriptor_property(
        self,
        obj: Any,
        name: str,
        value: Any,
        case_sensitive: bool = True,
        policy: PolicyArg = NotFoundPolicy.FAIL,
    ) -> None:
        """Write through the descriptor path regardless of classification."""
        request = PropertyRequest(obj, name, case_sensitive, policy)
        self.descriptors.set(obj, request.name, value, request.case_sensitive, request.policy)

    def make_getter_function(
        self,
        name: str,
        case_sensitive: bool = True,
        policy: PolicyArg = NotFoundPolicy.FAIL,
    ) -> Getter:
        """Produce a reusable getter for *name*.

        Static objects resolve through the shared getter cache keyed on their
        runtime type; dynamic and descriptor objects are resolved on each call
        because their members are per-instance.
        """
        require_name(name)
        resolved_policy = NotFoundPolicy.coerce(policy)
        cache = self.cache

        def getter(obj: Any) -> Any:
            request = PropertyRequest(obj, name, case_sensitive, resolved_policy)
            shape = self.classifier.classify(obj)
            if shape is not Shape.STATIC:
                return self._get(request, shape)
            cached = cache.resolve_static_getter(request.target_type, name, case_sensitive)
            if isinstance(cached, Unresolved):
                return handle_unresolved(cached, resolved_policy, name, request.target_type, Shape.STATIC)
            return cached(obj)

        getter.__name__ = f"get_{name}"
        getter.__qualname__ = f"{type(self).__name__}.make_getter_function.<{name}>"
        return getter

    def enumerate_properties(self, obj: Any) -> Iterator[PropertyPair]:
        return self.enumerator.enumerate(obj)

    def properties_to_dict(self, obj: Any) -> Dict[str, Any]:
        """Materialize enumeration; a repeated name keeps its last value."""
        return {pair.name: pair.value for pair in self.enumerate_properties(obj)}


_default_lock = threading.Lock()
_default_accessor: Optional[PropertyAccessor] = None


def get_default_accessor() -> PropertyAccessor:
    """Return the process-wide accessor, creating it on first use."""
    global _default_accessor

    accessor = _default_accessor
    if accessor is not None:
        return accessor
    with _default_lock:
        if _default_accessor is None:
            _default_accessor = PropertyAccessor()
            logger.debug(
                "Created default property accessor (cache_max_entries=%s, dynamic_fast_path=%s)",
                _default_accessor.settings.cache_max_entries,
                _default_accessor.settings.dynamic_fast_path,
            )
        return _default_accessor


def reset_default_accessor() -> None:
    """Drop the process-wide accessor and its cache; the next call rebuilds it."""
    global _default_accessor

    with _default_lock:
        _default_accessor = None
    get_accessor_settings.cache_clear()


def get_property(obj: Any, name: str, case_sensitive: bool = True, policy: PolicyArg = NotFoundPolicy.FAIL) -> Any:
    return get_default_accessor().get_property(obj, name, case_sensitive, policy)


def set_property(
    obj: Any,
    name: str,
    value: Any,
    case_sensitive: bool = True,
    policy: PolicyArg = NotFoundPolicy.FAIL,
) -> None:
    get_default_accessor().set_property(obj, name, value, case_sensitive, policy)


def make_getter_function(name: str, case_sensitive: bool = True, policy: PolicyArg = NotFoundPolicy.FAIL) -> Getter:
    return get_default_accessor().make_getter_function(name, case_sensitive, policy)


def enumerate_properties(obj: Any) -> Iterator[PropertyPair]:
    return get_default_accessor().enumerate_properties(obj)


def properties_to_dict(obj: Any) -> Dict[str, Any]:
    return get_default_accessor().properties_to_dict(obj)


__all__ = [
    "PropertyAccessor",
    "enumerate_properties",
    "get_default_accessor",
    "get_property",
    "make_getter_function",
    "properties_to_dict",
    "reset_default_accessor",
    "set_property",
]
