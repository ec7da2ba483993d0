"""Property reads on dynamic (expando) objects."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional

from ..access_models import ABSENT, NotFoundPolicy, PropertyPair, Shape, require_target
from ..metadata import DynamicMemberProvider
from ..metadata.protocols import IDynamicMemberProvider
from .name_matcher import NameMatcher
from .resolution import Unresolved, handle_unresolved

logger = logging.getLogger(__name__)


class DynamicAccessor:
    """Reads members that exist only at runtime.

    Lookups scan the live member names and read through the *stored* spelling
    of the match, so a case-insensitive query reaches a member whose case
    differs. With ``fast_path`` on, a case-sensitive lenient lookup skips the
    scan and asks the dynamic runtime for the literal name; a runtime miss
    becomes ``ABSENT``.

    There is no write path for dynamic objects.
    """

    def __init__(self, dynamic: Optional[IDynamicMemberProvider] = None, *, fast_path: bool = True) -> None:
        self._dynamic = dynamic if dynamic is not None else DynamicMemberProvider()
        self.fast_path = fast_path

    def canonical_name(self, obj: Any, name: str, case_sensitive: bool) -> Optional[str]:
        """Return the stored member name matching *name*, or None."""
        require_target(obj)
        matcher = NameMatcher(name, case_sensitive)
        for member in self._dynamic.list_member_names(obj):
            if matcher.matches(member):
                return member
        return None

    def get(self, obj: Any, name: str, case_sensitive: bool, policy: NotFoundPolicy) -> Any:
        require_target(obj)
        if self.fast_path and case_sensitive and policy is NotFoundPolicy.LENIENT:
            logger.debug("Dynamic fast path for %r on %s", name, type(obj).__qualname__)
            return self._dynamic.try_invoke_get(obj, name, ABSENT)

        member = self.canonical_name(obj, name, case_sensitive)
        if member is None:
            return handle_unresolved(Unresolved.MISSING, policy, name, type(obj), Shape.DYNAMIC)
        return self._dynamic.invoke_get(obj, member)

    def enumerate(self, obj: Any) -> Iterator[PropertyPair]:
        require_target(obj)
        for member in self._dynamic.list_member_names(obj):
            yield PropertyPair(member, self._dynamic.invoke_get(obj, member))


__all__ = ["DynamicAccessor"]
