"""
Scalar codec: wire values (as produced by xmlrpc.client) to native scalars and back.
rtorrent speaks integers and strings; booleans and fixed-point ratios are integers on the wire.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from rtorrent_rpc.core.errors import StructureError

T = TypeVar("T")


def _unexpected(value: Any, expected: str) -> StructureError:
    return StructureError(f"Got {value!r}, expected {expected}")


def decode_int(value: Any) -> int:
    # bool is an int subclass; a wire <boolean> is not an integer.
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise _unexpected(value, "integer")


def decode_fraction(value: Any) -> float:
    """rtorrent reports a few statistics (ratio) as integer thousandths."""
    return decode_int(value) / 1000.0


def decode_bool(value: Any) -> bool:
    # Integers are what rtorrent sends; accept a real boolean in case it ever does.
    if isinstance(value, int):
        return value != 0
    raise _unexpected(value, "bool or integer type")


def decode_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise _unexpected(value, "string")


def decode_void(value: Any) -> None:
    """Void is a zero-valued integer; nil is accepted too."""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and value == 0:
        return None
    raise _unexpected(value, "int(0) or nil")


def encode_int(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


def encode_bool(value: bool) -> int:
    return 1 if value else 0


def encode_str(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


def as_list(value: Any) -> list[Any]:
    """Unwrap an array wire value (multicall results, list-returning calls)."""
    if isinstance(value, list):
        return value
    raise _unexpected(value, "array")


@dataclass(frozen=True)
class ScalarType(Generic[T]):
    """One of the fixed wire scalar types: a name plus decode (and optional encode) rule."""

    name: str
    decoder: Callable[[Any], T]
    encoder: Callable[[T], Any] | None = None

    def decode(self, value: Any) -> T:
        return self.decoder(value)

    def encode(self, value: T) -> Any:
        if self.encoder is None:
            raise TypeError(f"{self.name} values cannot be sent to the server")
        return self.encoder(value)

    def __repr__(self) -> str:
        return f"ScalarType({self.name})"


INTEGER: ScalarType[int] = ScalarType("integer", decode_int, encode_int)
FRACTION: ScalarType[float] = ScalarType("fraction", decode_fraction)
BOOLEAN: ScalarType[bool] = ScalarType("boolean", decode_bool, encode_bool)
STRING: ScalarType[str] = ScalarType("string", decode_str, encode_str)
VOID: ScalarType[None] = ScalarType("void", decode_void)
