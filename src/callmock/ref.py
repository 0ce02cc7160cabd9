from __future__ import annotations

import copy
import dataclasses
from typing import Any, Optional

from callmock.errors import MockUsageError


@dataclasses.dataclass
class Ref:
    """A boxed, writable location for an output parameter.

    ``kind`` is the type a write must carry; it defaults to the type of the
    initial value.
    """

    value: Any
    kind: Optional[type] = None

    def __post_init__(self) -> None:
        if self.kind is None:
            if self.value is None:
                raise MockUsageError("Ref(None) needs an explicit kind")
            self.kind = type(self.value)
        elif self.value is not None and type(self.value) is not self.kind:
            raise MockUsageError(
                f"Ref value of type {type(self.value).__name__} does not match kind {self.kind.__name__}"
            )

    def get(self) -> Any:
        return self.value


def location_type(location: Any) -> type:
    if isinstance(location, Ref):
        return location.kind
    return type(location)


def _is_frozen(obj: Any) -> bool:
    params = getattr(type(obj), "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


def write_into(location: Any, value: Any) -> bool:
    """Write a copy of ``value`` through ``location``.

    Returns ``False`` when the types differ. The location receives a deep
    copy, never the expectation's own object.
    """
    if isinstance(location, Ref):
        if location.kind is not type(value):
            return False
        location.value = copy.deepcopy(value)
        return True

    if type(location) is not type(value):
        return False
    if isinstance(location, (list, bytearray)):
        location[:] = copy.deepcopy(value)
        return True
    if isinstance(location, dict):
        fresh = copy.deepcopy(value)
        location.clear()
        location.update(fresh)
        return True
    if hasattr(location, "__dict__") and not _is_frozen(location) and not isinstance(location, type):
        fresh = copy.deepcopy(value)
        state = vars(location)
        state.clear()
        state.update(vars(fresh))
        return True
    return False
