"""Peer: a connected peer of a download. Accessors correspond to rtorrent's p.* API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rtorrent_rpc.core.accessors import getter, setter
from rtorrent_rpc.core.values import BOOLEAN, INTEGER, STRING
from rtorrent_rpc.domain.entity import Entity

if TYPE_CHECKING:
    from rtorrent_rpc.domain.download import Download
    from rtorrent_rpc.rpc.server import Server


@dataclass(frozen=True)
class Peer(Entity):
    """
    Peer identified by rtorrent's peer id (p.id); key "<infohash>:p<peer id>".
    Peers disconnect at any time; accessors on a gone peer fail with RpcFault.
    """

    download: Download
    peer_hash: str

    @property
    def server(self) -> Server:  # type: ignore[override]
        return self.download.server

    @property
    def key(self) -> str:
        return f"{self.download.key}:p{self.peer_hash}"

    address = getter("p.address", STRING, "IP address of the peer.")
    banned = getter("p.banned", BOOLEAN)
    set_banned = setter("p.banned", BOOLEAN)
    client_version = getter("p.client_version", STRING, 'Parsed client version, or "Unknown".')
    completed_percent = getter("p.completed_percent", INTEGER)
    down_rate = getter("p.down_rate", INTEGER, "Download rate from this peer (bytes/s).")
    down_total = getter("p.down_total", INTEGER)
    id_html = getter("p.id_html", STRING, "Raw client id sent by the peer (URL-encoded), see BEP 20.")
    is_encrypted = getter("p.is_encrypted", BOOLEAN)
    is_incoming = getter("p.is_incoming", BOOLEAN, "Did the peer open the connection?")
    is_obfuscated = getter("p.is_obfuscated", BOOLEAN)
    is_preferred = getter("p.is_preferred", BOOLEAN)
    is_unwanted = getter("p.is_unwanted", BOOLEAN)
    peer_rate = getter("p.peer_rate", INTEGER, "Estimated download rate of the peer from the whole swarm.")
    peer_total = getter("p.peer_total", INTEGER)
    port = getter("p.port", INTEGER)
    snubbed = getter("p.snubbed", BOOLEAN)
    set_snubbed = setter("p.snubbed", BOOLEAN)
    up_rate = getter("p.up_rate", INTEGER)
    up_total = getter("p.up_total", INTEGER)
