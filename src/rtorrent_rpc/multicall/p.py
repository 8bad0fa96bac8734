"""p.* multicall: query the connected peers of one download (p.multicall)."""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, TypeVarTuple, Unpack

from rtorrent_rpc.core.values import BOOLEAN, INTEGER, STRING
from rtorrent_rpc.multicall import builder
from rtorrent_rpc.multicall.ops import EntityKind, Operation

if TYPE_CHECKING:
    from rtorrent_rpc.domain.download import Download
    from rtorrent_rpc.rpc.server import Server

T = TypeVar("T")
Ts = TypeVarTuple("Ts")


class PeerOp(Operation[T]):
    """A p.* operation for multicalls."""

    kind = EntityKind.PEER


class MultiBuilder(builder.MultiBuilder[Unpack[Ts]]):
    """Query across the peers of a download. Peers come and go between calls."""

    kind = EntityKind.PEER
    multicall = "p.multicall"

    def __init__(self: MultiBuilder[()], server: Server, download: Download | str) -> None:
        target = download if isinstance(download, str) else download.key
        super().__init__(server, target, "")

    def call(self, op: PeerOp[T]) -> MultiBuilder[Unpack[Ts], T]:
        return self._append(op)


ADDRESS = PeerOp("p.address", STRING)
BANNED = PeerOp("p.banned", BOOLEAN)
CLIENT_VERSION = PeerOp("p.client_version", STRING)
"""Parsed client name and version, or "Unknown"."""
COMPLETED_PERCENT = PeerOp("p.completed_percent", INTEGER)
DOWN_RATE = PeerOp("p.down_rate", INTEGER)
DOWN_TOTAL = PeerOp("p.down_total", INTEGER)
ID = PeerOp("p.id", STRING)
"""rtorrent's identifier for the peer; the peer part of a Peer key."""
ID_HTML = PeerOp("p.id_html", STRING)
"""Raw (URL-encoded) client id sent by the peer, see BEP 20."""
IS_ENCRYPTED = PeerOp("p.is_encrypted", BOOLEAN)
IS_INCOMING = PeerOp("p.is_incoming", BOOLEAN)
IS_OBFUSCATED = PeerOp("p.is_obfuscated", BOOLEAN)
IS_PREFERRED = PeerOp("p.is_preferred", BOOLEAN)
IS_UNWANTED = PeerOp("p.is_unwanted", BOOLEAN)
PEER_RATE = PeerOp("p.peer_rate", INTEGER)
"""Estimated download rate of the peer from the whole swarm."""
PEER_TOTAL = PeerOp("p.peer_total", INTEGER)
PORT = PeerOp("p.port", INTEGER)
SNUBBED = PeerOp("p.snubbed", BOOLEAN)
UP_RATE = PeerOp("p.up_rate", INTEGER)
UP_TOTAL = PeerOp("p.up_total", INTEGER)
