from __future__ import annotations

import base64
import dataclasses
import json
from collections.abc import Mapping
from typing import Any, Optional

from callmock.config import MockSettings
from callmock.errors import RenderError
from callmock.ref import Ref
from callmock.values import Skip, _Absent

JsonLike = Any


def _fields(obj: Any) -> dict[str, Any]:
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    return {k: v for k, v in vars(obj).items() if not k.startswith("_")}


def to_jsonable(obj: Any, _stack: Optional[set[int]] = None) -> JsonLike:
    """Convert bag contents into data ``json.dumps`` accepts.

    Containers are followed recursively; a container that contains itself
    raises :class:`RenderError`.
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, Skip):
        return "<skip>"
    if isinstance(obj, _Absent):
        return "<absent>"
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, BaseException):
        return f"{type(obj).__name__}: {obj}"
    if isinstance(obj, type):
        return obj.__qualname__
    if hasattr(obj, "model_dump") and callable(getattr(obj, "model_dump")):
        return obj.model_dump(mode="json")

    stack = set() if _stack is None else _stack
    if id(obj) in stack:
        raise RenderError(f"cannot render self-referencing {type(obj).__name__}")
    stack.add(id(obj))
    try:
        if isinstance(obj, Ref):
            return to_jsonable(obj.value, stack)
        if isinstance(obj, Mapping):
            return {k if isinstance(k, str) else str(k): to_jsonable(v, stack) for k, v in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [to_jsonable(item, stack) for item in obj]
        if isinstance(obj, (set, frozenset)):
            return sorted((to_jsonable(item, stack) for item in obj), key=repr)
        if dataclasses.is_dataclass(obj) or hasattr(obj, "__dict__"):
            return {k: to_jsonable(v, stack) for k, v in _fields(obj).items()}
        return str(obj)
    finally:
        stack.discard(id(obj))


def dump_jsonable(data: JsonLike, settings: Optional[MockSettings] = None) -> str:
    settings = settings or MockSettings()
    try:
        return json.dumps(
            data,
            sort_keys=settings.render_sort_keys,
            indent=settings.render_indent,
            separators=(",", ":") if settings.render_indent is None else None,
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise RenderError(f"cannot render {data!r}: {e}") from e


def render_values(values: Any, settings: Optional[MockSettings] = None) -> str:
    return dump_jsonable(to_jsonable(values), settings)
