"""Property access through an object's own descriptor list."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

from ..access_models import NotFoundPolicy, PropertyPair, Shape, require_target
from ..metadata import DescriptorProvider, is_read_only
from ..metadata.protocols import IDescriptorProvider, PropertyDescriptorLike
from .name_matcher import NameMatcher
from .resolution import Unresolved, handle_unresolved

DescriptorResolution = Union[PropertyDescriptorLike, Unresolved]


class DescriptorAccessor:
    """Resolves properties by scanning the descriptor list of a live object.

    Descriptor lists are name-unique by construction, so the first match wins
    for both reads and writes.
    """

    def __init__(self, descriptors: Optional[IDescriptorProvider] = None) -> None:
        self._descriptors = descriptors if descriptors is not None else DescriptorProvider()

    def find(self, obj: Any, name: str, case_sensitive: bool) -> DescriptorResolution:
        require_target(obj)
        matcher = NameMatcher(name, case_sensitive)
        for descriptor in self._descriptors.list_descriptors(obj):
            if matcher.matches(descriptor.name):
                return descriptor
        return Unresolved.MISSING

    def get(self, obj: Any, name: str, case_sensitive: bool, policy: NotFoundPolicy) -> Any:
        descriptor = self.find(obj, name, case_sensitive)
        if isinstance(descriptor, Unresolved):
            return handle_unresolved(descriptor, policy, name, type(obj), Shape.DESCRIPTOR)
        return descriptor.get_value(obj)

    def set(self, obj: Any, name: str, value: Any, case_sensitive: bool, policy: NotFoundPolicy) -> None:
        descriptor = self.find(obj, name, case_sensitive)
        if not isinstance(descriptor, Unresolved) and is_read_only(descriptor):
            descriptor = Unresolved.INACCESSIBLE
        if isinstance(descriptor, Unresolved):
            handle_unresolved(descriptor, policy, name, type(obj), Shape.DESCRIPTOR, access="setter")
            return
        descriptor.set_value(obj, value)

    def enumerate(self, obj: Any) -> Iterator[PropertyPair]:
        require_target(obj)
        for descriptor in self._descriptors.list_descriptors(obj):
            yield PropertyPair(descriptor.name, descriptor.get_value(obj))


__all__ = ["DescriptorAccessor", "DescriptorResolution"]
