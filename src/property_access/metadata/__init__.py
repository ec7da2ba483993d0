"""Metadata facilities consumed by the property accessors."""

from .descriptor_provider import DescriptorProvider, PropertyDescriptor, is_read_only
from .dynamic_provider import DynamicMemberProvider
from .protocols import (
    CustomTypeDescriptor,
    DynamicMetaObject,
    IDescriptorProvider,
    IDynamicMemberProvider,
    ITypeMetadataProvider,
    PropertyDescriptorLike,
)
from .type_metadata import StaticPropertyInfo, TypeMetadataProvider

__all__ = [
    "CustomTypeDescriptor",
    "DescriptorProvider",
    "DynamicMemberProvider",
    "DynamicMetaObject",
    "IDescriptorProvider",
    "IDynamicMemberProvider",
    "ITypeMetadataProvider",
    "PropertyDescriptor",
    "PropertyDescriptorLike",
    "StaticPropertyInfo",
    "TypeMetadataProvider",
    "is_read_only",
]
