"""Named-property access over static, descriptor and dynamic objects."""

from .access_models import ABSENT, NotFoundPolicy, PropertyPair, PropertyRequest, Shape, is_absent
from .config import AccessorSettings, ConfigurationError, get_accessor_settings
from .exceptions import (
    ApplicationError,
    InaccessiblePropertyError,
    InvalidNameError,
    NullTargetError,
    PropertyAccessError,
    PropertyNotFoundError,
)
from .metadata import (
    CustomTypeDescriptor,
    DynamicMetaObject,
    PropertyDescriptor,
    StaticPropertyInfo,
    TypeMetadataProvider,
)
from .property_accessor import (
    PropertyAccessor,
    enumerate_properties,
    get_default_accessor,
    get_property,
    make_getter_function,
    properties_to_dict,
    reset_default_accessor,
    set_property,
)
from .property_accessor_helpers import AccessorCache, CacheStats

__all__ = [
    "ABSENT",
    "AccessorCache",
    "AccessorSettings",
    "ApplicationError",
    "CacheStats",
    "ConfigurationError",
    "CustomTypeDescriptor",
    "DynamicMetaObject",
    "InaccessiblePropertyError",
    "InvalidNameError",
    "NotFoundPolicy",
    "NullTargetError",
    "PropertyAccessError",
    "PropertyAccessor",
    "PropertyDescriptor",
    "PropertyNotFoundError",
    "PropertyPair",
    "PropertyRequest",
    "Shape",
    "StaticPropertyInfo",
    "TypeMetadataProvider",
    "enumerate_properties",
    "get_accessor_settings",
    "get_default_accessor",
    "get_property",
    "is_absent",
    "make_getter_function",
    "properties_to_dict",
    "reset_default_accessor",
    "set_property",
]
