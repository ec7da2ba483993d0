"""Determines which access shape an object presents."""

from __future__ import annotations

from typing import Any, Optional

from ..access_models import Shape, require_target
from ..metadata import DescriptorProvider, DynamicMemberProvider
from ..metadata.protocols import IDescriptorProvider, IDynamicMemberProvider


class ShapeClassifier:
    """Probes capabilities in priority order: dynamic, descriptor, static.

    Every object has a type, so the static shape is the fallback.
    """

    def __init__(
        self,
        dynamic: Optional[IDynamicMemberProvider] = None,
        descriptors: Optional[IDescriptorProvider] = None,
    ) -> None:
        self._dynamic = dynamic if dynamic is not None else DynamicMemberProvider()
        self._descriptors = descriptors if descriptors is not None else DescriptorProvider()

    def classify(self, obj: Any) -> Shape:
        require_target(obj)
        if self._dynamic.is_dynamic(obj):
            return Shape.DYNAMIC
        if self._descriptors.is_descriptor_shaped(obj):
            return Shape.DESCRIPTOR
        return Shape.STATIC


__all__ = ["ShapeClassifier"]
