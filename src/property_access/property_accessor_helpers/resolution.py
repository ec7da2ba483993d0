"""Resolution markers and the not-found policy applied to them."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from ..access_models import ABSENT, NotFoundPolicy, Shape
from ..exceptions import InaccessiblePropertyError, PropertyNotFoundError

logger = logging.getLogger(__name__)


class Unresolved(Enum):
    """Why a property lookup produced no accessor."""

    MISSING = "missing"
    INACCESSIBLE = "inaccessible"


def handle_unresolved(
    marker: Unresolved,
    policy: NotFoundPolicy,
    name: str,
    target_type: type,
    shape: Shape,
    *,
    access: str = "getter",
) -> Any:
    """Raise under the fail policy, otherwise return ``ABSENT``."""
    if policy is NotFoundPolicy.FAIL:
        if marker is Unresolved.INACCESSIBLE:
            raise InaccessiblePropertyError.for_property(name, target_type, shape, access=access)
        raise PropertyNotFoundError.for_property(name, target_type, shape)
    logger.debug(
        "Lenient %s miss for %r on %s (%s)", shape.value, name, target_type.__qualname__, marker.value
    )
    return ABSENT


__all__ = ["Unresolved", "handle_unresolved"]
