"""
rtorrent-rpc: typed client for rtorrent's XML-RPC API.
Server is the entry point; Download/File/Peer/Tracker wrap the d/f/p/t accessors;
rtorrent_rpc.multicall queries many objects in one call.
"""
from rtorrent_rpc.core import (
    Config,
    RpcFault,
    RtorrentError,
    StructureError,
    TransportError,
    load_config_from_env,
)
from rtorrent_rpc.domain import Download, File, Peer, Tracker
from rtorrent_rpc.rpc import Server

__all__ = [
    "Server",
    "Download",
    "File",
    "Peer",
    "Tracker",
    "Config",
    "load_config_from_env",
    "RtorrentError",
    "TransportError",
    "RpcFault",
    "StructureError",
]
