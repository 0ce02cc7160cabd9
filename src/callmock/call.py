from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from callmock.errors import BadCallInputError, BadFuncCallError, MockError
from callmock.ref import Ref
from callmock.values import Vs, as_vs

if TYPE_CHECKING:
    from callmock.config import MockSettings


@dataclass(frozen=True)
class Call:
    """One call to a mocked operation, expected or actually received.

    On an expected call ``outputs`` are handed back to the caller and ``sets``
    are written into the caller's output locations. On an actual call
    ``sets`` holds those locations.
    """

    name: str
    inputs: Vs = field(default_factory=Vs)
    outputs: Vs = field(default_factory=Vs)
    sets: Vs = field(default_factory=Vs)

    def __post_init__(self) -> None:
        for name in ("inputs", "outputs", "sets"):
            object.__setattr__(self, name, as_vs(getattr(self, name)))

    def with_outputs(self, *values: Any) -> Call:
        return dataclasses.replace(self, outputs=Vs(*values))

    def with_sets(self, *values: Any) -> Call:
        return dataclasses.replace(self, sets=Vs(*values))


def fn(name: str, *inputs: Any) -> Call:
    return Call(name=name, inputs=Vs(*inputs))


def _has_own_eq(obj: Any) -> bool:
    return type(obj).__eq__ is not object.__eq__


def _typed(value: Any) -> Any:
    """Hashable key that keeps the type of every element, so 1 and True differ."""
    if isinstance(value, tuple):
        return (type(value), tuple(_typed(v) for v in value))
    if isinstance(value, frozenset):
        return (type(value), frozenset(_typed(v) for v in value))
    return (type(value), value)


def deep_equal(a: Any, b: Any, _seen: Optional[set[tuple[int, int]]] = None) -> bool:
    """Type-aware structural equality.

    ``1``, ``1.0`` and ``True`` are all different here, unlike with ``==``.
    """
    if type(a) is not type(b):
        return False
    if a is b:
        return True
    if a is None or isinstance(a, (bool, int, float, complex, str, bytes)):
        return a == b

    seen = set() if _seen is None else _seen
    key = (id(a), id(b))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(a, Ref):
        return a.kind is b.kind and deep_equal(a.value, b.value, seen)
    if isinstance(a, (tuple, list)):
        return len(a) == len(b) and all(deep_equal(x, y, seen) for x, y in zip(a, b))
    if isinstance(a, dict):
        if {_typed(k) for k in a} != {_typed(k) for k in b}:
            return False
        return all(deep_equal(a[k], b[k], seen) for k in a)
    if isinstance(a, (set, frozenset)):
        return {_typed(v) for v in a} == {_typed(v) for v in b}
    if isinstance(a, bytearray):
        return a == b
    if isinstance(a, BaseException):
        return deep_equal(a.args, b.args, seen)
    if dataclasses.is_dataclass(a):
        return all(
            deep_equal(getattr(a, f.name), getattr(b, f.name), seen)
            for f in dataclasses.fields(a)
            if f.compare
        )
    if _has_own_eq(a):
        return bool(a == b)
    if hasattr(a, "__dict__"):
        return deep_equal(vars(a), vars(b), seen)
    return a == b


def match_call(
    want: Call,
    got: Call,
    index: Optional[int] = None,
    settings: Optional[MockSettings] = None,
) -> Optional[MockError]:
    if want.name != got.name:
        return BadFuncCallError(got=got.name, want=want.name, index=index)
    if not deep_equal(got.inputs, want.inputs):
        return BadCallInputError(fn=got.name, got=got.inputs, want=want.inputs, index=index, settings=settings)
    return None
