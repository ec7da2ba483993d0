"""Enumerates (name, value) pairs for objects of any shape."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from ..access_models import PropertyPair, Shape, require_target
from .descriptor_accessor import DescriptorAccessor
from .dynamic_accessor import DynamicAccessor
from .shape_classifier import ShapeClassifier
from .static_accessor import StaticAccessor


class PropertyEnumerator:
    """Read-only enumeration entry point; does not use the getter cache.

    The returned iterator is lazy and read-once. Dynamic members and
    descriptor values are read as iteration advances, so changes made to the
    object mid-iteration may or may not be observed.
    """

    def __init__(
        self,
        classifier: Optional[ShapeClassifier] = None,
        static: Optional[StaticAccessor] = None,
        descriptors: Optional[DescriptorAccessor] = None,
        dynamic: Optional[DynamicAccessor] = None,
    ) -> None:
        self._classifier = classifier if classifier is not None else ShapeClassifier()
        self._static = static if static is not None else StaticAccessor()
        self._descriptors = descriptors if descriptors is not None else DescriptorAccessor()
        self._dynamic = dynamic if dynamic is not None else DynamicAccessor()

    def enumerate(self, obj: Any) -> Iterator[PropertyPair]:
        require_target(obj)
        shape = self._classifier.classify(obj)
        if shape is Shape.DYNAMIC:
            return self._dynamic.enumerate(obj)
        if shape is Shape.DESCRIPTOR:
            return self._descriptors.enumerate(obj)
        return self._static.enumerate(obj)


__all__ = ["PropertyEnumerator"]
