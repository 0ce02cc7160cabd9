"""Mock adapters used by the tests.

Each adapter forwards its calls to a shared :class:`callmock.Context` and
reads its return values from the bag the context hands back.
"""

from dataclasses import dataclass
from typing import Optional

from callmock import Call, Context, Ref, Vs


@dataclass
class User:
    name: str = ""


class ServiceMock:
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    def serve1(self) -> None:
        self.ctx.got(Call("serve1"))

    def serve2(self, in1: str, in2: bool) -> None:
        self.ctx.got(Call("serve2", Vs(in1, in2)))

    def serve3(self, *args: str) -> tuple[int, Optional[BaseException]]:
        out = self.ctx.got(Call("serve3", Vs(*args)))
        return out.int_at(0), out.error_at(1)

    def serve4(self, text: str, out: Ref) -> Optional[BaseException]:
        return self.ctx.got(Call("serve4", Vs(text, out), sets=Vs(out))).error_at(0)


class ApiMock:
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    def fetch(self, user: User) -> Optional[BaseException]:
        return self.ctx.got(Call("fetch", Vs(user), sets=Vs(user))).error_at(0)


class DatabaseMock:
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    def save(self, user: User) -> Optional[BaseException]:
        return self.ctx.got(Call("save", Vs(user))).error_at(0)


class StuffError(RuntimeError):
    pass


def do_stuff(api: ApiMock, db: DatabaseMock) -> User:
    """Code under test: fetch a user into a fresh record, then save it."""
    user = User()
    err = api.fetch(user)
    if err is not None:
        raise err
    err = db.save(user)
    if err is not None:
        raise err
    return user
