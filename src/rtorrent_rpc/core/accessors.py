"""
Accessor tables: build handle methods from (api name, scalar type) pairs.

    class Download(Entity):
        name = getter("d.name", STRING, "Name of the torrent.")

Getters and commands send the handle's key as the only argument; setters add the
encoded value and call "<api>.set". Setters and commands expect a void reply.
"""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from rtorrent_rpc.core.values import VOID, ScalarType

T = TypeVar("T")


def _named(fn: Callable[..., Any], api: str, doc: str | None) -> None:
    fn.__name__ = fn.__qualname__ = api.replace(".", "_")
    fn.__doc__ = doc or f"{api}"


def getter(api: str, scalar: ScalarType[T], doc: str | None = None) -> Callable[[Any], T]:
    """Method calling api on the handle and decoding the reply as scalar."""

    def method(self: Any) -> T:
        return scalar.decode(self.execute(api))

    _named(method, api, doc)
    return method


def setter(api: str, scalar: ScalarType[T], doc: str | None = None) -> Callable[[Any, T], None]:
    """Method calling "<api>.set" on the handle with the new value."""

    def method(self: Any, value: T) -> None:
        VOID.decode(self.execute(f"{api}.set", scalar.encode(value)))

    _named(method, f"{api}.set", doc)
    return method


def command(api: str, doc: str | None = None) -> Callable[[Any], None]:
    """Method triggering an action (e.g. d.start) on the handle."""

    def method(self: Any) -> None:
        VOID.decode(self.execute(api))

    _named(method, api, doc)
    return method
