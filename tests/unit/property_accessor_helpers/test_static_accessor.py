"""Tests for StaticAccessor."""

from __future__ import annotations

import pytest

from property_access import ABSENT, InaccessiblePropertyError, NotFoundPolicy, NullTargetError, PropertyNotFoundError, Shape
from property_access.metadata import StaticPropertyInfo
from property_access.property_accessor_helpers import StaticAccessor, Unresolved
from tests.helpers.sample_objects import (
    Employee,
    FrozenPoint,
    InstrumentedMetadata,
    Person,
    Slotted,
    Target,
    Vault,
    duplicated_value_metadata,
)

FAIL = NotFoundPolicy.FAIL
LENIENT = NotFoundPolicy.LENIENT


class TestResolveGetter:
    """Tests for getter resolution."""

    def test_returns_property_info(self) -> None:
        """Resolution returns the metadata entry of the match."""
        info = StaticAccessor().resolve_getter(Person, "age", case_sensitive=False)
        assert isinstance(info, StaticPropertyInfo)
        assert info.name == "Age"
        assert info.invoke_get(Person("Ada", 36)) == 36

    def test_missing_marker(self) -> None:
        """No match by name yields MISSING."""
        assert StaticAccessor().resolve_getter(Person, "Height", True) is Unresolved.MISSING

    def test_inaccessible_marker(self) -> None:
        """Matches without getters yield INACCESSIBLE."""
        assert StaticAccessor().resolve_getter(Vault, "Secret", True) is Unresolved.INACCESSIBLE

    def test_first_readable_declaration_wins(self) -> None:
        """The first declared readable match is selected."""
        metadata = InstrumentedMetadata({Target: duplicated_value_metadata()})
        info = StaticAccessor(metadata).resolve_getter(Target, "value", False)
        assert info.invoke_get(Target()) == "first"

    def test_skips_getterless_duplicate(self) -> None:
        """A getter-less first declaration does not block a readable later one."""
        entries = [
            StaticPropertyInfo("Value", None, lambda obj, value: None, Target),
            StaticPropertyInfo("Value", lambda obj: "readable", None, Target),
        ]
        accessor = StaticAccessor(InstrumentedMetadata({Target: entries}))
        assert accessor.get(Target(), "Value", True, FAIL) == "readable"

    def test_none_type_raises(self) -> None:
        """Resolution requires a type."""
        with pytest.raises(NullTargetError):
            StaticAccessor().resolve_getter(None, "Name", True)


class TestResolveSetter:
    """Tests for setter resolution."""

    def test_last_writable_declaration_wins(self) -> None:
        """Every match overwrites the previous selection."""
        metadata = InstrumentedMetadata({Target: duplicated_value_metadata()})
        target = Target()
        StaticAccessor(metadata).set(target, "Value", 1, True, FAIL)
        assert target.writes == [("second", 1)]

    def test_read_only_later_duplicate_keeps_writable(self) -> None:
        """A read-only later declaration does not discard a writable earlier one."""
        target = Target()
        entries = [
            StaticPropertyInfo("Value", None, lambda obj, value: obj.writes.append(("w", value)), Target),
            StaticPropertyInfo("Value", lambda obj: 0, None, Target),
        ]
        StaticAccessor(InstrumentedMetadata({Target: entries})).set(target, "Value", 3, True, FAIL)
        assert target.writes == [("w", 3)]

    def test_inaccessible_marker(self) -> None:
        """Matches without setters yield INACCESSIBLE."""
        assert StaticAccessor().resolve_setter(Person, "Age", True) is Unresolved.INACCESSIBLE

    def test_frozen_dataclass_is_read_only(self) -> None:
        """Frozen dataclass fields cannot be written."""
        with pytest.raises(InaccessiblePropertyError):
            StaticAccessor().set(FrozenPoint(1, 2), "x", 5, True, FAIL)

    def test_slots_are_writable(self) -> None:
        """Slot members accept writes."""
        slotted = Slotted(1)
        StaticAccessor().set(slotted, "ALPHA", 9, False, FAIL)
        assert slotted.alpha == 9


class TestGetAndSetPolicies:
    """Tests for not-found policy handling."""

    def test_fail_raises_with_context(self) -> None:
        """Fail policy raises PropertyNotFoundError carrying the lookup context."""
        with pytest.raises(PropertyNotFoundError) as excinfo:
            StaticAccessor().get(Person("Ada", 36), "Height", True, FAIL)
        assert excinfo.value.property_name == "Height"
        assert excinfo.value.target_type is Person
        assert excinfo.value.shape is Shape.STATIC

    def test_lenient_returns_absent(self) -> None:
        """Lenient policy returns ABSENT."""
        assert StaticAccessor().get(Person("Ada", 36), "Height", True, LENIENT) is ABSENT

    def test_lenient_set_does_nothing(self) -> None:
        """Lenient writes to read-only properties are ignored."""
        person = Person("Ada", 36)
        StaticAccessor().set(person, "Age", 1, True, LENIENT)
        assert person.Age == 36

    def test_inherited_properties(self) -> None:
        """Base class properties are reachable and overrides win."""
        employee = Employee("Grace", 45, "Admiral")
        accessor = StaticAccessor()
        assert accessor.get(employee, "Name", True, FAIL) == "Grace"
        assert accessor.get(employee, "Age", True, FAIL) == 1045


class TestNullTargets:
    """Tests for missing targets."""

    def test_get_and_set_reject_none(self) -> None:
        accessor = StaticAccessor()
        with pytest.raises(NullTargetError):
            accessor.get(None, "Name", True, FAIL)
        with pytest.raises(NullTargetError):
            accessor.set(None, "Name", "Ada", True, LENIENT)

    def test_enumerate_rejects_none(self) -> None:
        with pytest.raises(NullTargetError):
            list(StaticAccessor().enumerate(None))


class TestEnumerate:
    """Tests for static enumeration."""

    def test_enumerates_readable_properties_in_declaration_order(self) -> None:
        """Derived declarations come before inherited ones."""
        pairs = list(StaticAccessor().enumerate(Employee("Grace", 45, "Admiral")))
        assert [name for name, _ in pairs] == ["Title", "Age", "Name", "Nickname"]

    def test_scans_once_per_enumeration(self) -> None:
        """Each enumeration reads metadata once."""
        metadata = InstrumentedMetadata()
        list(StaticAccessor(metadata).enumerate(Person("Ada", 36)))
        assert metadata.scan_count == 1
