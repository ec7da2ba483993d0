"""
Focused helper classes for PropertyAccessor functionality.

Each helper owns one step of named-property access: shape classification,
name matching, per-shape resolution, getter caching and enumeration.
"""

from .accessor_cache import AccessorCache, CacheStats
from .descriptor_accessor import DescriptorAccessor
from .dynamic_accessor import DynamicAccessor
from .name_matcher import NameMatcher, names_match
from .property_enumerator import PropertyEnumerator
from .resolution import Unresolved, handle_unresolved
from .shape_classifier import ShapeClassifier
from .static_accessor import StaticAccessor

__all__ = [
    "AccessorCache",
    "CacheStats",
    "DescriptorAccessor",
    "DynamicAccessor",
    "NameMatcher",
    "PropertyEnumerator",
    "ShapeClassifier",
    "StaticAccessor",
    "Unresolved",
    "handle_unresolved",
    "names_match",
]
