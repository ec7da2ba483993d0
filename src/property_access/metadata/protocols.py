"""Protocol definitions for the metadata facilities consumed by the accessors.

The accessors never introspect objects themselves. They go through three
providers (static type metadata, descriptor lists, dynamic members) typed by
the protocols below, so tests and callers can swap in their own facilities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from .type_metadata import StaticPropertyInfo


@runtime_checkable
class PropertyDescriptorLike(Protocol):
    """One entry of a descriptor list: a named property with get/set behavior."""

    name: str

    def get_value(self, component: Any) -> Any:
        """Read the property from *component*."""

    def set_value(self, component: Any, value: Any) -> None:
        """Write *value* to the property on *component*."""


@runtime_checkable
class CustomTypeDescriptor(Protocol):
    """Object that describes its own properties through a descriptor list."""

    def get_properties(self) -> Sequence[PropertyDescriptorLike]:
        """Return the live descriptor list."""


@runtime_checkable
class DynamicMetaObject(Protocol):
    """Object whose members exist only at runtime."""

    def get_dynamic_member_names(self) -> Sequence[str]:
        """Return the names of the members currently present."""

    def get_dynamic_member(self, name: str) -> Any:
        """Return a member value, raising ``AttributeError`` when absent."""


class ITypeMetadataProvider(Protocol):
    """Protocol for static type metadata scanning."""

    def list_properties(self, cls: type) -> Sequence["StaticPropertyInfo"]:
        """Return the declared properties of *cls* in declaration order."""


class IDescriptorProvider(Protocol):
    """Protocol for descriptor-list access."""

    def is_descriptor_shaped(self, obj: Any) -> bool:
        """Return True when *obj* supplies a descriptor list."""

    def list_descriptors(self, obj: Any) -> Sequence[PropertyDescriptorLike]:
        """Return the descriptor list of *obj*."""


class IDynamicMemberProvider(Protocol):
    """Protocol for runtime member dispatch."""

    def is_dynamic(self, obj: Any) -> bool:
        """Return True when *obj* resolves members at runtime."""

    def list_member_names(self, obj: Any) -> Sequence[str]:
        """Return live member names of *obj*."""

    def invoke_get(self, obj: Any, name: str) -> Any:
        """Read member *name*, raising on a miss."""

    def try_invoke_get(self, obj: Any, name: str, missing: Any) -> Any:
        """Read member *name*, returning *missing* on a miss."""


__all__ = [
    "CustomTypeDescriptor",
    "DynamicMetaObject",
    "IDescriptorProvider",
    "IDynamicMemberProvider",
    "ITypeMetadataProvider",
    "PropertyDescriptorLike",
]
