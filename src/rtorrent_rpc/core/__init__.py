from rtorrent_rpc.core.config import Config, load_config_from_env
from rtorrent_rpc.core.errors import RpcFault, RtorrentError, StructureError, TransportError
from rtorrent_rpc.core.values import BOOLEAN, FRACTION, INTEGER, STRING, VOID, ScalarType, as_list

__all__ = [
    "Config",
    "load_config_from_env",
    "RtorrentError",
    "TransportError",
    "RpcFault",
    "StructureError",
    "ScalarType",
    "INTEGER",
    "FRACTION",
    "BOOLEAN",
    "STRING",
    "VOID",
    "as_list",
]
