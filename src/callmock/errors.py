from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from callmock.config import MockSettings
    from callmock.values import Vs

E_CALL_COUNT = "E_CALL_COUNT"
E_CALL_FUNC = "E_CALL_FUNC"
E_CALL_INPUT = "E_CALL_INPUT"
E_RENDER = "E_RENDER"


class MockError(AssertionError):
    code = "E_MOCK"


class BadNumCallError(MockError):
    code = E_CALL_COUNT

    def __init__(self, got: int, want: int) -> None:
        self.got = got
        self.want = want
        super().__init__(f"mock: wrong number of calls; got {got}, want {want}.")


class BadFuncCallError(MockError):
    code = E_CALL_FUNC

    def __init__(self, got: str, want: str, index: Optional[int] = None) -> None:
        self.got = got
        self.want = want
        self.index = index
        where = "" if index is None else f" at #{index}"
        super().__init__(f"mock: wrong func call{where}; got {got!r}, want {want!r}.")


class BadCallInputError(MockError):
    """Names agree but the input bags differ.

    Both bags are converted to JSON data when the error is built, before any
    output location is written, so the message shows what was compared. A
    conversion failure is kept and raised when the message is requested.
    """

    code = E_CALL_INPUT

    def __init__(
        self,
        fn: str,
        got: Vs,
        want: Vs,
        index: Optional[int] = None,
        settings: Optional[MockSettings] = None,
    ) -> None:
        from callmock.render import to_jsonable

        self.fn = fn
        self.got = got
        self.want = want
        self.index = index
        self.settings = settings
        self._snapshot: Optional[tuple[Any, Any]] = None
        self._render_error: Optional[RenderError] = None
        try:
            self._snapshot = (to_jsonable(got), to_jsonable(want))
        except RenderError as e:
            self._render_error = e
        super().__init__(fn, got, want)

    def __str__(self) -> str:
        from callmock.render import dump_jsonable

        if self._render_error is not None:
            raise self._render_error
        got, want = (dump_jsonable(data, self.settings) for data in self._snapshot)
        where = "" if self.index is None else f" #{self.index}"
        return f"mock: {self.fn!r} call{where} In\n got: {got}\nwant: {want}"


class RenderError(MockError):
    code = E_RENDER

    def __init__(self, message: str) -> None:
        super().__init__(f"{E_RENDER}: {message}")


class MockUsageError(RuntimeError):
    pass


class MockConfigError(ValueError):
    pass


@dataclass(frozen=True)
class SetMismatch:
    """An output-location write that was skipped because the types disagree."""

    index: int
    call: str
    position: int
    location_type: str
    value_type: str

    def describe(self) -> str:
        return (
            f"mock: {self.call!r} call #{self.index} Set[{self.position}] not written; "
            f"location {self.location_type}, value {self.value_type}"
        )
