"""
Server: a logical rtorrent instance (endpoint + transport) and the single-call primitive.
Every accessor in the library ends up in Server.execute().
"""
from __future__ import annotations

import logging
import xmlrpc.client
from typing import Any
from xml.parsers.expat import ExpatError

from rtorrent_rpc.core.accessors import command, getter
from rtorrent_rpc.core.config import Config
from rtorrent_rpc.core.errors import RpcFault, StructureError, TransportError
from rtorrent_rpc.core.values import INTEGER, STRING, as_list, decode_int, decode_str
from rtorrent_rpc.domain.download import Download
from rtorrent_rpc.rpc.protocol import Addressable, Transport
from rtorrent_rpc.rpc.transport import transport_for

logger = logging.getLogger(__name__)


def _marshal(arg: Any) -> Any:
    if isinstance(arg, Addressable):
        return arg.key
    return arg


class Server:
    """
    rtorrent instance at an endpoint: http(s) URL, scgi://host:port or unix socket path.
    A ready Transport can be passed instead (custom transports, tests).

        with Server("http://127.0.0.1/RPC2") as server:
            print(server.hostname())
            for dl in server.download_list():
                print(dl.name())
    """

    def __init__(self, endpoint: str | Transport, timeout: float | None = None) -> None:
        if isinstance(endpoint, str):
            self.endpoint = endpoint
            self.transport = transport_for(endpoint, timeout=timeout)
        else:
            self.endpoint = repr(endpoint)
            self.transport = endpoint

    @classmethod
    def from_config(cls, config: Config) -> Server:
        return cls(config.url, timeout=config.timeout)

    def execute(self, method: str, *args: Any) -> Any:
        """
        One XML-RPC round trip: method(*args). Entity handles are sent as their key.
        Returns the decoded wire value; no retries.
        """
        params = tuple(_marshal(a) for a in args)
        logger.debug("%s (%d args) -> %s", method, len(params), self.endpoint)
        payload = xmlrpc.client.dumps(params, method, encoding="utf-8").encode("utf-8")
        response = self.transport.call(payload)
        try:
            values, _ = xmlrpc.client.loads(response, use_builtin_types=True)
        except xmlrpc.client.Fault as e:
            logger.debug("%s faulted: %s (%s)", method, e.faultString, e.faultCode)
            raise RpcFault(e.faultCode, e.faultString) from e
        except (ExpatError, xmlrpc.client.ResponseError) as e:
            raise TransportError(f"malformed XML-RPC response to {method}: {e}") from e
        if len(values) != 1:
            raise StructureError(f"Got {len(values)} response params to {method}, expected 1")
        return values[0]

    def download(self, info_hash: str) -> Download:
        """Handle for the download with this infohash (not checked against the server)."""
        return Download(self, info_hash)

    def download_list(self, view: str = "") -> list[Download]:
        """Downloads loaded in this instance, optionally restricted to a view."""
        args = ("", view) if view else ()
        return [Download.from_value(self, v) for v in as_list(self.execute("download_list", *args))]

    def view_list(self) -> list[str]:
        return [decode_str(v) for v in as_list(self.execute("view.list"))]

    def load_torrent_url(self, link: str, start: bool = False) -> int:
        """Add a torrent from URL or magnet link; with start, start it too."""
        load = "load.start_verbose" if start else "load.verbose"
        return decode_int(self.execute(load, "", link))

    def load_torrent_bytes(self, contents: bytes, start: bool = False) -> int:
        """Add a torrent from metafile contents; with start, start it too."""
        load = "load.raw_start_verbose" if start else "load.raw_verbose"
        return decode_int(self.execute(load, "", contents))

    ip = getter("network.bind_address", STRING, "IP address rtorrent binds to.")
    port = getter("network.port_range", STRING, "Listening port range.")
    hostname = getter("system.hostname", STRING)
    startup_time = getter("system.startup_time", INTEGER, "Unix time this instance started.")
    api_version = getter("system.api_version", STRING)
    client_version = getter("system.client_version", STRING, "rtorrent version.")
    library_version = getter("system.library_version", STRING, "libtorrent version.")
    down_total = getter("throttle.global_down.total", INTEGER)
    down_rate = getter("throttle.global_down.rate", INTEGER, "Global download rate (bytes/s).")
    up_total = getter("throttle.global_up.total", INTEGER)
    up_rate = getter("throttle.global_up.rate", INTEGER, "Global upload rate (bytes/s).")
    shutdown = command(
        "system.shutdown.normal",
        "Exit rtorrent, telling trackers we are going away and waiting for them to acknowledge.",
    )

    def close(self) -> None:
        """Release the transport's connections (HTTP keeps a pool; SCGI holds none between calls)."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Server:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Server({self.endpoint!r})"
