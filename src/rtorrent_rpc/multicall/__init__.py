"""
Multicalls: one XML-RPC call evaluating several accessors over a whole collection.
One submodule per collection (d, f, p, t), each with a MultiBuilder and its operation constants.
"""
from rtorrent_rpc.multicall import d, f, p, t
from rtorrent_rpc.multicall.builder import MultiBuilder
from rtorrent_rpc.multicall.ops import EntityKind, Operation

__all__ = [
    "d",
    "f",
    "p",
    "t",
    "MultiBuilder",
    "EntityKind",
    "Operation",
]
