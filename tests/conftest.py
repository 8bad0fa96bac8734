"""Shared fixtures: a transport that answers from a table, speaking real XML-RPC."""
from __future__ import annotations

import xmlrpc.client
from typing import Any, Callable

import pytest

from rtorrent_rpc import Server

INFO_HASH = "ABCD"


class FakeTransport:
    """
    Decodes each request with xmlrpc.client and answers from responses[method].
    A callable response gets the request params; an xmlrpc.client.Fault is sent as a fault.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.requests: list[tuple[str, tuple[Any, ...]]] = []

    def call(self, payload: bytes) -> bytes:
        params, method = xmlrpc.client.loads(payload, use_builtin_types=True)
        self.requests.append((method, params))
        result = self.responses[method]
        if callable(result):
            result = result(*params)
        if isinstance(result, xmlrpc.client.Fault):
            return xmlrpc.client.dumps(result, methodresponse=True).encode()
        return xmlrpc.client.dumps((result,), methodresponse=True, allow_none=True).encode()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def server(transport: FakeTransport) -> Server:
    return Server(transport)


@pytest.fixture
def respond(transport: FakeTransport) -> Callable[[str, Any], None]:
    def _respond(method: str, result: Any) -> None:
        transport.responses[method] = result

    return _respond
