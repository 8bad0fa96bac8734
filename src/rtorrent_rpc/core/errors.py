"""Unified error type: every failure surfaced by the client is an RtorrentError."""
from __future__ import annotations


class RtorrentError(Exception):
    """Call failed: transport, server fault or unexpected response shape."""

    code = "RTORRENT_ERROR"

    def __init__(self, message: str, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class TransportError(RtorrentError):
    """Network/socket failure, HTTP error status or malformed XML-RPC response."""

    code = "TRANSPORT_ERROR"


class RpcFault(TransportError):
    """The server answered with an XML-RPC fault."""

    code = "FAULT"

    def __init__(self, fault_code: int, fault_string: str) -> None:
        self.fault_code = fault_code
        self.fault_string = fault_string
        super().__init__(f"{fault_string} (fault {fault_code})")


class StructureError(RtorrentError):
    """A wire value did not have the shape the caller expected."""

    code = "UNEXPECTED_STRUCTURE"
