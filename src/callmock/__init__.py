from .call import Call, deep_equal, fn, match_call
from .config import MockSettings, load_settings
from .context import Context, new, want, wants
from .errors import (
    BadCallInputError,
    BadFuncCallError,
    BadNumCallError,
    MockConfigError,
    MockError,
    MockUsageError,
    RenderError,
    SetMismatch,
)
from .ref import Ref, write_into
from .values import ABSENT, X, Skip, Vs

__all__ = [
    "ABSENT",
    "BadCallInputError",
    "BadFuncCallError",
    "BadNumCallError",
    "Call",
    "Context",
    "MockConfigError",
    "MockError",
    "MockSettings",
    "MockUsageError",
    "Ref",
    "RenderError",
    "SetMismatch",
    "Skip",
    "Vs",
    "X",
    "deep_equal",
    "fn",
    "load_settings",
    "match_call",
    "new",
    "want",
    "wants",
    "write_into",
]
