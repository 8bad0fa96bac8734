"""Tracker: one tracker of a download. Accessors correspond to rtorrent's t.* API."""
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
class Tracker(Entity):
    """Tracker at position index within its download; key "<infohash>:t<index>"."""

    download: Download
    index: int

    @property
    def server(self) -> Server:  # type: ignore[override]
        return self.download.server

    @property
    def key(self) -> str:
        return f"{self.download.key}:t{self.index}"

    url = getter("t.url", STRING)
    activity_time_last = getter("t.activity_time_last", INTEGER)
    activity_time_next = getter("t.activity_time_next", INTEGER)
    group = getter("t.group", INTEGER)
    id = getter("t.id", STRING)
    latest_sum_peers = getter("t.latest_sum_peers", INTEGER)
    is_enabled = getter("t.is_enabled", BOOLEAN)
    set_enabled = setter("t.is_enabled", BOOLEAN)
    type = getter("t.type", INTEGER, "1 http, 2 udp, 3 dht.")
