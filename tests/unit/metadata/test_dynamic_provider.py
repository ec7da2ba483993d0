"""Tests for DynamicMemberProvider."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from property_access import ABSENT
from property_access.metadata import DynamicMemberProvider
from tests.helpers.sample_objects import Expando, LateBound, Person, Record


class _Proxy:
    """__getattr__ without __dir__: members come from the instance dictionary."""

    label = "class-level"

    def __init__(self):
        self.visible = 1
        self._private = 2

    def __getattr__(self, name):
        raise AttributeError(name)


class TestIsDynamic:
    """Tests for dynamic-shape detection."""

    @pytest.mark.parametrize("obj", [Expando(), SimpleNamespace(), {}, LateBound(), _Proxy()])
    def test_dynamic(self, obj) -> None:
        """Protocol objects, namespaces, mappings and __getattr__ types are dynamic."""
        assert DynamicMemberProvider().is_dynamic(obj) is True

    @pytest.mark.parametrize("obj", [Person("Ada", 36), Record({}), 1, None])
    def test_not_dynamic(self, obj) -> None:
        """Ordinary objects are not dynamic."""
        assert DynamicMemberProvider().is_dynamic(obj) is False


class TestMembers:
    """Tests for member listing and reads."""

    def test_protocol_members(self) -> None:
        """Protocol objects list their own members."""
        provider = DynamicMemberProvider()
        expando = Expando(a=1)
        assert provider.list_member_names(expando) == ["a"]
        assert provider.invoke_get(expando, "a") == 1

    def test_namespace_members_skip_private(self) -> None:
        """Namespace members are public instance attributes."""
        assert DynamicMemberProvider().list_member_names(SimpleNamespace(a=1, _b=2)) == ["a"]

    def test_getattr_members_from_instance_dict(self) -> None:
        """Without __dir__, instance attributes not declared on the type are members."""
        assert DynamicMemberProvider().list_member_names(_Proxy()) == ["visible"]

    def test_getattr_members_from_dir(self) -> None:
        """__dir__ overrides advertise members."""
        assert DynamicMemberProvider().list_member_names(LateBound()) == ["Color", "Size"]

    def test_try_invoke_get(self) -> None:
        """Runtime misses map to the supplied value."""
        provider = DynamicMemberProvider()
        assert provider.try_invoke_get(Expando(), "nope", ABSENT) is ABSENT
        assert provider.try_invoke_get({"k": 1}, "k", ABSENT) == 1

    def test_invoke_get_rejects_type_attributes(self) -> None:
        """Names the type declares are not dynamic members."""
        provider = DynamicMemberProvider()
        with pytest.raises(AttributeError):
            provider.invoke_get(SimpleNamespace(a=1), "__class__")
        with pytest.raises(AttributeError):
            provider.invoke_get(_Proxy(), "label")
        assert provider.invoke_get(_Proxy(), "visible") == 1
