"""Descriptor-list access for objects that describe their own properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from ..access_models import require_target
from .protocols import CustomTypeDescriptor, PropertyDescriptorLike


@dataclass(frozen=True)
class PropertyDescriptor:
    """Concrete descriptor built from getter/setter callables.

    Example:
        >>> class Row:
        ...     def __init__(self, cells):
        ...         self.cells = cells
        ...     def get_properties(self):
        ...         return [
        ...             PropertyDescriptor(key, getter=lambda row, k=key: row.cells[k])
        ...             for key in self.cells
        ...         ]
    """

    name: str
    getter: Callable[[Any], Any]
    setter: Optional[Callable[[Any, Any], None]] = None

    @property
    def is_read_only(self) -> bool:
        return self.setter is None

    def get_value(self, component: Any) -> Any:
        return self.getter(component)

    def set_value(self, component: Any, value: Any) -> None:
        if self.setter is None:
            raise AttributeError(f"descriptor {self.name!r} is read-only")
        self.setter(component, value)


def is_read_only(descriptor: PropertyDescriptorLike) -> bool:
    """Descriptors without an ``is_read_only`` attribute are writable."""
    return bool(getattr(descriptor, "is_read_only", False))


class DescriptorProvider:
    """Reads descriptor lists from objects exposing ``get_properties()``.

    The check is made against the object's type so that permissive
    ``__getattr__`` implementations do not claim the descriptor shape.
    """

    def is_descriptor_shaped(self, obj: Any) -> bool:
        return obj is not None and isinstance(type(obj), CustomTypeDescriptor)

    def list_descriptors(self, obj: CustomTypeDescriptor) -> Sequence[PropertyDescriptorLike]:
        require_target(obj)
        return obj.get_properties()


__all__ = ["DescriptorProvider", "PropertyDescriptor", "is_read_only"]
