import copy
import pickle

from callmock import ABSENT, X, Vs


def test_value_at_in_and_out_of_range() -> None:
    vs = Vs("a", None, 3)
    assert vs.value_at(0) == "a"
    assert vs.value_at(1) is None
    assert vs.value_at(3) is ABSENT
    assert vs.value_at(-1) is ABSENT
    assert Vs().value_at(0) is ABSENT


def test_typed_accessors_return_values_of_exact_type() -> None:
    err = ValueError("boom")
    vs = Vs(True, 42, 1.5, "s", b"raw", err)
    assert vs.bool_at(0) is True
    assert vs.int_at(1) == 42
    assert vs.float_at(2) == 1.5
    assert vs.str_at(3) == "s"
    assert vs.bytes_at(4) == b"raw"
    assert vs.error_at(5) is err


def test_typed_accessors_fall_back_to_zero_values() -> None:
    vs = Vs("not a number", 1, True, bytearray(b"x"))
    assert vs.int_at(0) == 0
    assert vs.float_at(1) == 0.0
    assert vs.int_at(2) == 0
    assert vs.bool_at(1) is False
    assert vs.bytes_at(3) == b""
    assert vs.str_at(9) == ""
    assert vs.error_at(0) is None
    assert vs.error_at(9) is None


def test_zero_value_is_ambiguous_with_missing_slot() -> None:
    # A provided zero and a missing slot read the same.
    assert Vs(0).int_at(0) == Vs().int_at(0) == 0
    assert Vs("").str_at(0) == Vs().str_at(5)
    assert Vs(None).error_at(0) is Vs().error_at(0) is None


def test_error_at_accepts_subclasses() -> None:
    class AppError(RuntimeError):
        pass

    err = AppError("x")
    assert Vs(err).error_at(0) is err


def test_skip_sentinel_is_distinct() -> None:
    assert X is not None
    assert X != 0
    assert X != "X"
    assert repr(X) == "X"


def test_vs_survives_copy_and_pickle() -> None:
    vs = Vs(1, "two", [3])
    assert copy.copy(vs) == vs
    assert isinstance(copy.deepcopy(vs), Vs)
    assert pickle.loads(pickle.dumps(vs)) == vs
    assert pickle.loads(pickle.dumps(X)) is X
