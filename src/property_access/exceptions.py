"""Exception classes for named-property access.

All custom exceptions inherit from ApplicationError to keep a consistent
hierarchy. Each property error also derives from the closest builtin so that
callers catching ``TypeError``/``ValueError``/``LookupError`` keep working.

Exception classes support two patterns:
1. No-argument raise: raise PropertyNotFoundError()
2. Contextual attributes: err = PropertyNotFoundError(property_name="x"); raise err
"""

from __future__ import annotations

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class PropertyAccessError(ApplicationError):
    """Named property access failed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Named property access failed"
        super().__init__(message, **kwargs)


class NullTargetError(PropertyAccessError, TypeError):
    """Target object or required argument is missing."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Target object is a null reference"
        super().__init__(message, **kwargs)

    @classmethod
    def for_argument(cls, argument: str) -> "NullTargetError":
        """Create error for a missing argument."""
        return cls(f"{argument} is a null reference", argument=argument)


class InvalidNameError(PropertyAccessError, ValueError):
    """Property name is missing or empty."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Property name is a null reference or empty string"
        super().__init__(message, **kwargs)

    @classmethod
    def for_name(cls, name: object) -> "InvalidNameError":
        """Create error for an unusable property name."""
        if name is None or name == "":
            return cls(property_name=name)
        return cls(f"Property name must be a string (received {type(name).__name__})", property_name=name)


class PropertyNotFoundError(PropertyAccessError, LookupError):
    """No property matched the requested name."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Property name does not name a property on the target"
        super().__init__(message, **kwargs)

    @classmethod
    def for_property(cls, name: str, target_type: type, shape: Optional[object] = None) -> "PropertyNotFoundError":
        """Create error for a name that matched nothing on *target_type*."""
        msg = f"{name!r} does not name a property on {target_type.__name__}"
        return cls(msg, property_name=name, target_type=target_type, shape=shape)


class InaccessiblePropertyError(PropertyNotFoundError):
    """Matching property has no usable getter or setter."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Matching property has no usable accessor"
        super().__init__(message, **kwargs)

    @classmethod
    def for_property(  # type: ignore[override]
        cls,
        name: str,
        target_type: type,
        shape: Optional[object] = None,
        *,
        access: str = "getter",
    ) -> "InaccessiblePropertyError":
        """Create error for a matching property that lacks the requested accessor."""
        msg = f"{name!r} on {target_type.__name__} has no accessible {access}"
        return cls(msg, property_name=name, target_type=target_type, shape=shape, access=access)


__all__ = [
    "ApplicationError",
    "InaccessiblePropertyError",
    "InvalidNameError",
    "NullTargetError",
    "PropertyAccessError",
    "PropertyNotFoundError",
]
