"""Expectation context: the engine shared by every mock adapter of a test.

Adapters forward each intercepted call to :meth:`Context.got` and read their
return values from the bag it returns. Mismatches are collected as they
happen and only surfaced by :meth:`Context.verify` at the end of the test.

A context is not thread-safe. Adapters called from several threads must
serialize their calls into it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from callmock.call import Call, match_call
from callmock.config import MockSettings, load_settings
from callmock.errors import BadNumCallError, MockError, MockUsageError, SetMismatch
from callmock.ref import location_type, write_into
from callmock.render import render_values
from callmock.values import ABSENT, Skip, Vs

logger = logging.getLogger(__name__)


class Context:
    def __init__(self, calls: Iterable[Call] = (), settings: Optional[MockSettings] = None) -> None:
        self.settings = settings if settings is not None else load_settings()
        self._want: list[Call] = []
        self._got: list[Call] = []
        self._errs: list[MockError] = []
        self._set_mismatches: list[SetMismatch] = []
        self.wants(calls)

    @property
    def expected(self) -> tuple[Call, ...]:
        return tuple(self._want)

    @property
    def actual(self) -> tuple[Call, ...]:
        return tuple(self._got)

    @property
    def errors(self) -> tuple[MockError, ...]:
        return tuple(self._errs)

    @property
    def set_mismatches(self) -> tuple[SetMismatch, ...]:
        return tuple(self._set_mismatches)

    def want(self, call: Call) -> None:
        self.wants([call])

    def wants(self, calls: Iterable[Call]) -> None:
        """Register calls expected to happen, in the given order."""
        calls = list(calls)
        if calls and self._got:
            raise MockUsageError("expectations must be registered before the first call is recorded")
        for call in calls:
            if not isinstance(call, Call):
                raise MockUsageError(f"expected a Call, got {type(call).__name__}")
        self._want.extend(calls)

    def got(self, call: Call) -> Vs:
        """Record ``call`` and return the outputs of the matching expectation."""
        want = self._match(call)
        if want is None:
            return Vs()
        return want.outputs

    def _match(self, got: Call) -> Optional[Call]:
        index = len(self._got)
        want: Optional[Call] = None
        if index < len(self._want):
            want = self._want[index]
            err = match_call(want, got, index=index, settings=self.settings)
            if err is not None:
                self._errs.append(err)
        else:
            logger.debug("call #%d %r has no expectation", index, got.name)
        self._got.append(got)
        logger.debug("recorded call #%d %r", index, got.name)

        # Writes go through the caller's locations, which the match above may
        # have compared; they must happen after it.
        if want is not None:
            self._apply_sets(index, want, got)
        return want

    def _apply_sets(self, index: int, want: Call, got: Call) -> None:
        for pos, value in enumerate(want.sets):
            if isinstance(value, Skip):
                continue
            location = got.sets.value_at(pos)
            if location is not ABSENT and write_into(location, value):
                continue
            mismatch = SetMismatch(
                index=index,
                call=got.name,
                position=pos,
                location_type="<missing>" if location is ABSENT else location_type(location).__name__,
                value_type=type(value).__name__,
            )
            self._set_mismatches.append(mismatch)
            logger.log(self.settings.set_mismatch_levelno, "%s", mismatch.describe())

    def verify(self) -> Optional[MockError]:
        """Return the first failed expectation, or ``None``.

        A wrong number of calls wins over any recorded mismatch.
        """
        got, want = len(self._got), len(self._want)
        if got != want:
            return BadNumCallError(got=got, want=want)
        if self._errs:
            return self._errs[0]
        return None

    def check(self) -> None:
        err = self.verify()
        if err is not None:
            raise err

    def report(self) -> str:
        lines = ["expected:"]
        lines.extend(self._format_calls(self._want))
        lines.append("actual:")
        lines.extend(self._format_calls(self._got))
        return "\n".join(lines)

    def _format_calls(self, calls: list[Call]) -> list[str]:
        if not calls:
            return ["  [none]"]
        return [f"  {i}: {c.name} {render_values(c.inputs, self.settings)}" for i, c in enumerate(calls)]


def new(settings: Optional[MockSettings] = None) -> Context:
    return Context(settings=settings)


def want(call: Call, settings: Optional[MockSettings] = None) -> Context:
    return Context([call], settings=settings)


def wants(calls: Iterable[Call], settings: Optional[MockSettings] = None) -> Context:
    return Context(calls, settings=settings)


__all__ = ["Context", "new", "want", "wants"]
