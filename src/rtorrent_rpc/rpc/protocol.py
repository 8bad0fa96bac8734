"""RPC protocols: how a request body reaches rtorrent and how objects are addressed on the wire."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Transport: send an XML-RPC request body, get the XML response body. HTTP or SCGI."""

    def call(self, payload: bytes) -> bytes:
        ...


@runtime_checkable
class Addressable(Protocol):
    """Remote object with a wire key; passed as the first argument of its accessors."""

    @property
    def key(self) -> str:
        ...
