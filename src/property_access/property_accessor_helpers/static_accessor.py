"""Property access through static type metadata."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

from ..access_models import NotFoundPolicy, PropertyPair, Shape, require_target
from ..metadata import StaticPropertyInfo, TypeMetadataProvider
from ..metadata.protocols import ITypeMetadataProvider
from .name_matcher import NameMatcher
from .resolution import Unresolved, handle_unresolved

StaticResolution = Union[StaticPropertyInfo, Unresolved]


class StaticAccessor:
    """Resolves getters and setters by scanning a type's declared properties.

    Resolution depends only on the type, never on an instance, which is what
    lets the getter cache key on type identity.

    Getters take the *first* declared match that can be read. Setters take the
    *last* declared match that can be written: every match overwrites the
    previous one rather than stopping early. The two rules differ on types
    whose metadata repeats a name.
    """

    def __init__(self, metadata: Optional[ITypeMetadataProvider] = None) -> None:
        self._metadata = metadata if metadata is not None else TypeMetadataProvider()

    def resolve_getter(self, cls: type, name: str, case_sensitive: bool) -> StaticResolution:
        require_target(cls, "type")
        matcher = NameMatcher(name, case_sensitive)
        any_named = False
        for info in self._metadata.list_properties(cls):
            if not matcher.matches(info.name):
                continue
            any_named = True
            if info.has_getter:
                return info
        return Unresolved.INACCESSIBLE if any_named else Unresolved.MISSING

    def resolve_setter(self, cls: type, name: str, case_sensitive: bool) -> StaticResolution:
        require_target(cls, "type")
        matcher = NameMatcher(name, case_sensitive)
        selected: StaticResolution = Unresolved.MISSING
        for info in self._metadata.list_properties(cls):
            if not matcher.matches(info.name):
                continue
            if info.has_setter:
                selected = info
            elif selected is Unresolved.MISSING:
                selected = Unresolved.INACCESSIBLE
        return selected

    def get(self, obj: Any, name: str, case_sensitive: bool, policy: NotFoundPolicy) -> Any:
        require_target(obj)
        resolved = self.resolve_getter(type(obj), name, case_sensitive)
        if isinstance(resolved, Unresolved):
            return handle_unresolved(resolved, policy, name, type(obj), Shape.STATIC)
        return resolved.invoke_get(obj)

    def set(self, obj: Any, name: str, value: Any, case_sensitive: bool, policy: NotFoundPolicy) -> None:
        require_target(obj)
        resolved = self.resolve_setter(type(obj), name, case_sensitive)
        if isinstance(resolved, Unresolved):
            handle_unresolved(resolved, policy, name, type(obj), Shape.STATIC, access="setter")
            return
        resolved.invoke_set(obj, value)

    def enumerate(self, obj: Any) -> Iterator[PropertyPair]:
        """Yield readable declared properties, skipping those without a getter."""
        require_target(obj)
        for info in self._metadata.list_properties(type(obj)):
            if info.has_getter:
                yield PropertyPair(info.name, info.invoke_get(obj))


__all__ = ["StaticAccessor", "StaticResolution"]
