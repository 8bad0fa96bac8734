"""t.* multicall: query the trackers of one download (t.multicall)."""
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


class TrackerOp(Operation[T]):
    """A t.* operation for multicalls."""

    kind = EntityKind.TRACKER


class MultiBuilder(builder.MultiBuilder[Unpack[Ts]]):
    """Query across the trackers of a download."""

    kind = EntityKind.TRACKER
    multicall = "t.multicall"

    def __init__(self: MultiBuilder[()], server: Server, download: Download | str) -> None:
        target = download if isinstance(download, str) else download.key
        super().__init__(server, target, "")

    def call(self, op: TrackerOp[T]) -> MultiBuilder[Unpack[Ts], T]:
        return self._append(op)


URL = TrackerOp("t.url", STRING)
ACTIVITY_TIME_LAST = TrackerOp("t.activity_time_last", INTEGER)
"""Last time rtorrent contacted the tracker (unix time)."""
ACTIVITY_TIME_NEXT = TrackerOp("t.activity_time_next", INTEGER)
GROUP = TrackerOp("t.group", INTEGER)
ID = TrackerOp("t.id", STRING)
LATEST_SUM_PEERS = TrackerOp("t.latest_sum_peers", INTEGER)
"""Peers returned by the last scrape."""
IS_ENABLED = TrackerOp("t.is_enabled", BOOLEAN)
TYPE = TrackerOp("t.type", INTEGER)
"""1 http, 2 udp, 3 dht."""
