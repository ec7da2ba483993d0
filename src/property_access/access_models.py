"""Data models shared by the property accessor components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Union

from .exceptions import InvalidNameError, NullTargetError


class Shape(Enum):
    """Property-access capability set presented by an object."""

    DYNAMIC = "dynamic"
    DESCRIPTOR = "descriptor"
    STATIC = "static"


class NotFoundPolicy(Enum):
    """Behavior when no matching property exists."""

    FAIL = "fail"
    LENIENT = "lenient"

    @classmethod
    def coerce(cls, value: Union["NotFoundPolicy", bool]) -> "NotFoundPolicy":
        """Accept a policy or a raise-if-missing flag."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.FAIL if value else cls.LENIENT
        raise TypeError(f"Not-found policy must be NotFoundPolicy or bool (got {type(value).__name__})")


class _Absent:
    """Marker returned for a missing property under the lenient policy."""

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def is_absent(value: Any) -> bool:
    return value is ABSENT


def require_target(target: Any, argument: str = "target") -> None:
    if target is None:
        raise NullTargetError.for_argument(argument)


def require_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidNameError.for_name(name)


@dataclass(frozen=True)
class PropertyRequest:
    """A single named-property lookup.

    Validated on construction so contract violations surface at the call site.
    """

    target: Any
    name: str
    case_sensitive: bool = True
    policy: NotFoundPolicy = NotFoundPolicy.FAIL

    def __post_init__(self) -> None:
        require_target(self.target)
        require_name(self.name)
        object.__setattr__(self, "policy", NotFoundPolicy.coerce(self.policy))

    @property
    def target_type(self) -> type:
        return type(self.target)


class PropertyPair(NamedTuple):
    """Name and value produced by property enumeration."""

    name: str
    value: Any


__all__ = [
    "ABSENT",
    "NotFoundPolicy",
    "PropertyPair",
    "PropertyRequest",
    "Shape",
    "is_absent",
    "require_name",
    "require_target",
]
