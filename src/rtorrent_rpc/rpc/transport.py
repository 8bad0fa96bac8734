"""
Concrete transports: XML-RPC over HTTP (httpx) and over SCGI (unix socket or TCP).
rtorrent itself only speaks SCGI; HTTP endpoints are a web server proxying to it.
"""
from __future__ import annotations

import logging
import socket
from urllib.parse import urlsplit

import httpx

from rtorrent_rpc.core.errors import TransportError
from rtorrent_rpc.rpc.protocol import Transport

logger = logging.getLogger(__name__)

_HEADER_TERMINATORS = (b"\r\n\r\n", b"\n\n")


class HttpTransport:
    """POST the request body to an XML-RPC URL (usually .../RPC2)."""

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def call(self, payload: bytes) -> bytes:
        try:
            r = self._client.post(self.url, content=payload, headers={"Content-Type": "text/xml"})
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.debug("HTTP %d from %s", e.response.status_code, self.url)
            raise TransportError(f"HTTP {e.response.status_code} from {self.url}") from e
        except httpx.HTTPError as e:
            logger.debug("HTTP request to %s failed: %s", self.url, e)
            raise TransportError(f"{type(e).__name__}: {e}") from e
        return r.content

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"HttpTransport({self.url!r})"


def scgi_request(body: bytes) -> bytes:
    """Frame body as an SCGI request: netstring of NUL-separated headers, then the body."""
    headers = (
        ("CONTENT_LENGTH", str(len(body))),
        ("SCGI", "1"),
        ("REQUEST_METHOD", "POST"),
        ("SERVER_PROTOCOL", "HTTP/1.1"),
    )
    raw = b"".join(f"{k}\0{v}\0".encode() for k, v in headers)
    return b"%d:%s," % (len(raw), raw) + body


def strip_headers(response: bytes) -> bytes:
    """Drop the CGI-style headers rtorrent puts in front of the XML body."""
    cuts = [
        idx + len(sep)
        for sep in _HEADER_TERMINATORS
        if (idx := response.find(sep)) != -1
    ]
    if not cuts:
        raise TransportError(f"SCGI response has no header terminator ({len(response)} bytes)")
    return response[min(cuts):]


class ScgiTransport:
    """SCGI to rtorrent's scgi_local (unix socket path) or scgi_port ((host, port))."""

    def __init__(self, address: str | tuple[str, int], timeout: float | None = None) -> None:
        self.address = address
        self.timeout = timeout

    def _connect(self) -> socket.socket:
        if isinstance(self.address, tuple):
            return socket.create_connection(self.address, timeout=self.timeout)
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.settimeout(self.timeout)
            sock.connect(self.address)
        except OSError:
            sock.close()
            raise
        return sock

    def call(self, payload: bytes) -> bytes:
        chunks: list[bytes] = []
        try:
            with self._connect() as sock:
                sock.sendall(scgi_request(payload))
                while True:
                    chunk = sock.recv(65536)
                    if not chunk:
                        break
                    chunks.append(chunk)
        except OSError as e:
            logger.debug("SCGI call to %s failed: %s", self.address, e)
            raise TransportError(f"SCGI {self.address}: {e}") from e
        return strip_headers(b"".join(chunks))

    def __repr__(self) -> str:
        return f"ScgiTransport({self.address!r})"


def transport_for(endpoint: str, timeout: float | None = None) -> Transport:
    """http(s)://... -> HTTP; scgi://host:port -> SCGI over TCP; anything else is a unix socket path."""
    if endpoint.startswith(("http://", "https://")):
        return HttpTransport(endpoint, timeout=timeout)
    if endpoint.startswith("scgi://"):
        parts = urlsplit(endpoint)
        if not parts.hostname or parts.port is None:
            raise ValueError(f"scgi endpoint needs host and port: {endpoint!r}")
        return ScgiTransport((parts.hostname, parts.port), timeout=timeout)
    return ScgiTransport(endpoint, timeout=timeout)
