"""Objects of each access shape used across the accessor tests."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from property_access.metadata import PropertyDescriptor, StaticPropertyInfo, TypeMetadataProvider


class Person:
    """Static shape: plain properties."""

    species = "human"

    def __init__(self, name: str, age: int) -> None:
        self._name = name
        self._age = age
        self._nickname = ""

    @property
    def Name(self) -> str:
        return self._name

    @Name.setter
    def Name(self, value: str) -> None:
        self._name = value

    @property
    def Age(self) -> int:
        return self._age

    @property
    def Nickname(self) -> str:
        return self._nickname

    @Nickname.setter
    def Nickname(self, value: str) -> None:
        self._nickname = value

    def greet(self) -> str:
        return f"hello {self._name}"


def _set_secret(obj: "Vault", value: str) -> None:
    obj._secret = value


class Vault:
    """Static shape with a write-only property."""

    def __init__(self) -> None:
        self._secret = "s3cret"

    Secret = property(None, _set_secret)

    @property
    def Label(self) -> str:
        return "vault"


@dataclass
class Point:
    x: int
    y: int
    _hidden: int = 0

    @property
    def norm1(self) -> int:
        return abs(self.x) + abs(self.y)


@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


class Slotted:
    __slots__ = ("alpha", "_beta")

    def __init__(self, alpha: int) -> None:
        self.alpha = alpha
        self._beta = 2


class Lazy:
    def __init__(self) -> None:
        self.computed = 0

    @functools.cached_property
    def total(self) -> int:
        self.computed += 1
        return 42


class Employee(Person):
    def __init__(self, name: str, age: int, title: str) -> None:
        super().__init__(name, age)
        self._title = title

    @property
    def Title(self) -> str:
        return self._title

    @property
    def Age(self) -> int:
        return self._age + 1000


class Record:
    """Descriptor shape: properties described by the object itself."""

    def __init__(self, values: Dict[str, Any], read_only: Sequence[str] = ()) -> None:
        self.values = dict(values)
        self.read_only = set(read_only)
        self.list_calls = 0

    def get_properties(self) -> List[PropertyDescriptor]:
        self.list_calls += 1
        descriptors = []
        for key in self.values:
            setter = None if key in self.read_only else self._make_setter(key)
            descriptors.append(PropertyDescriptor(key, getter=self._make_getter(key), setter=setter))
        return descriptors

    @staticmethod
    def _make_getter(key: str):
        def _get(record: "Record") -> Any:
            return record.values[key]

        return _get

    @staticmethod
    def _make_setter(key: str):
        def _set(record: "Record", value: Any) -> None:
            record.values[key] = value

        return _set


class Expando:
    """Dynamic shape through the explicit member protocol.

    Also declares a static ``Name`` property so precedence can be observed:
    dynamic reads bump ``dynamic_reads``, static reads bump ``static_reads``.
    """

    def __init__(self, **members: Any) -> None:
        self.members = dict(members)
        self.dynamic_reads = 0
        self.static_reads = 0

    def get_dynamic_member_names(self) -> List[str]:
        return list(self.members)

    def get_dynamic_member(self, name: str) -> Any:
        self.dynamic_reads += 1
        try:
            return self.members[name]
        except KeyError as exc:
            raise AttributeError(name) from exc

    @property
    def Name(self) -> str:
        self.static_reads += 1
        return "static"


class LateBound:
    """Dynamic shape through ``__getattr__`` with advertised members."""

    _members = {"Color": "red", "Size": 3}

    def __dir__(self):
        return list(self._members)

    def __getattr__(self, name: str) -> Any:
        try:
            return self._members[name]
        except KeyError as exc:
            raise AttributeError(name) from exc


class InstrumentedMetadata:
    """Type metadata double that counts scans and can override results."""

    def __init__(self, overrides: Dict[type, Sequence[StaticPropertyInfo]] | None = None) -> None:
        self._inner = TypeMetadataProvider()
        self._overrides = dict(overrides or {})
        self.scans: List[type] = []

    @property
    def scan_count(self) -> int:
        return len(self.scans)

    def list_properties(self, cls: type) -> Sequence[StaticPropertyInfo]:
        self.scans.append(cls)
        if cls in self._overrides:
            return tuple(self._overrides[cls])
        return self._inner.list_properties(cls)


class Target:
    """Plain attribute holder used with duplicated metadata."""

    def __init__(self) -> None:
        self.writes: List[tuple[str, Any]] = []


def duplicated_value_metadata() -> List[StaticPropertyInfo]:
    """Two declarations of ``Value``: each records which one was used."""

    def first_get(obj: Target) -> str:
        return "first"

    def second_get(obj: Target) -> str:
        return "second"

    def first_set(obj: Target, value: Any) -> None:
        obj.writes.append(("first", value))

    def second_set(obj: Target, value: Any) -> None:
        obj.writes.append(("second", value))

    return [
        StaticPropertyInfo("Value", first_get, first_set, Target),
        StaticPropertyInfo("Value", second_get, second_set, Target),
    ]
