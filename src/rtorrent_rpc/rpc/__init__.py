from rtorrent_rpc.rpc.protocol import Addressable, Transport
from rtorrent_rpc.rpc.server import Server
from rtorrent_rpc.rpc.transport import HttpTransport, ScgiTransport, transport_for

__all__ = [
    "Server",
    "Transport",
    "Addressable",
    "HttpTransport",
    "ScgiTransport",
    "transport_for",
]
