from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from callmock import X, BadCallInputError, BadNumCallError, MockSettings, Ref, RenderError, Vs
from callmock.render import render_values, to_jsonable


@dataclass
class User:
    name: str


class Account(BaseModel):
    id: int
    owner: str


class Session:
    def __init__(self) -> None:
        self.token = "t"
        self._secret = "hidden"


def test_to_jsonable_handles_bag_contents() -> None:
    data = to_jsonable(Vs(User("John"), Ref(3), b"hi", ValueError("bad"), X, Account(id=1, owner="o"), Session()))
    assert data == [
        {"name": "John"},
        3,
        "aGk=",
        "ValueError: bad",
        "<skip>",
        {"id": 1, "owner": "o"},
        {"token": "t"},
    ]


def test_render_values_is_compact_and_sorted_by_default() -> None:
    assert render_values(Vs({"b": 1, "a": None})) == '[{"a":null,"b":1}]'


def test_render_values_honours_settings() -> None:
    settings = MockSettings(render_indent=2, render_sort_keys=False)
    text = render_values(Vs({"b": 1, "a": 2}), settings)
    assert text.index('"b"') < text.index('"a"')
    assert "\n" in text


def test_render_values_rejects_cycles() -> None:
    loop: list = []
    loop.append(loop)
    with pytest.raises(RenderError):
        render_values(Vs(loop))


def test_input_error_message_renders_both_bags() -> None:
    err = BadCallInputError(fn="save", got=Vs(User("Joe")), want=Vs(User("John")), index=1)
    assert str(err) == 'mock: \'save\' call #1 In\n got: [{"name":"Joe"}]\nwant: [{"name":"John"}]'
    assert err.code == "E_CALL_INPUT"


def test_input_error_render_failure_aborts() -> None:
    loop: dict = {}
    loop["self"] = loop
    err = BadCallInputError(fn="f", got=Vs(loop), want=Vs())
    with pytest.raises(RenderError):
        str(err)


def test_count_error_message() -> None:
    err = BadNumCallError(got=1, want=2)
    assert str(err) == "mock: wrong number of calls; got 1, want 2."
    assert isinstance(err, AssertionError)
