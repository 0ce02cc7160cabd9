from __future__ import annotations

from typing import Any, Optional

from callmock.errors import MockUsageError


class _Absent:
    _instance: Optional[_Absent] = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


class Skip:
    """Marker telling the engine to leave an output location untouched."""

    _instance: Optional[Skip] = None

    def __new__(cls) -> Skip:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "X"

    def __reduce__(self) -> str:
        return "X"


ABSENT = _Absent()
X = Skip()


class Vs(tuple):
    """Ordered, heterogeneous bag of call arguments or return values.

    Built positionally, ``Vs("a", 1)``. The ``*_at`` accessors never raise:
    an out-of-range index or a value of another type yields the zero value
    of the requested type, so ``int_at`` cannot tell a missing slot from an
    explicit ``0``.
    """

    def __new__(cls, *values: Any) -> Vs:
        return super().__new__(cls, values)

    def __getnewargs__(self) -> tuple[Any, ...]:
        return tuple(self)

    def __repr__(self) -> str:
        return "Vs(" + ", ".join(repr(v) for v in self) + ")"

    def value_at(self, index: int) -> Any:
        if 0 <= index < len(self):
            return self[index]
        return ABSENT

    def bool_at(self, index: int) -> bool:
        v = self.value_at(index)
        return v if type(v) is bool else False

    def int_at(self, index: int) -> int:
        v = self.value_at(index)
        return v if type(v) is int else 0

    def float_at(self, index: int) -> float:
        v = self.value_at(index)
        return v if type(v) is float else 0.0

    def str_at(self, index: int) -> str:
        v = self.value_at(index)
        return v if type(v) is str else ""

    def bytes_at(self, index: int) -> bytes:
        v = self.value_at(index)
        return v if type(v) is bytes else b""

    def error_at(self, index: int) -> Optional[BaseException]:
        v = self.value_at(index)
        return v if isinstance(v, BaseException) else None


def as_vs(values: Any) -> Vs:
    if isinstance(values, Vs):
        return values
    if values is None:
        return Vs()
    if isinstance(values, (str, bytes, bytearray)):
        raise MockUsageError(f"a bag needs a sequence of values, got {type(values).__name__}; wrap it as Vs(...)")
    return Vs(*values)
