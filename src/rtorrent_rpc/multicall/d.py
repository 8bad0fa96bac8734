"""d.* multicall: query downloads in a view (d.multicall2)."""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, TypeVarTuple, Unpack

from rtorrent_rpc.core.values import BOOLEAN, FRACTION, INTEGER, STRING
from rtorrent_rpc.multicall import builder
from rtorrent_rpc.multicall.ops import EntityKind, Operation

if TYPE_CHECKING:
    from rtorrent_rpc.rpc.server import Server

T = TypeVar("T")
Ts = TypeVarTuple("Ts")


class DownloadOp(Operation[T]):
    """A d.* operation for multicalls."""

    kind = EntityKind.DOWNLOAD


class MultiBuilder(builder.MultiBuilder[Unpack[Ts]]):
    """
    Query across the downloads of an rtorrent view ("main", "default", "started", ...).

        for info_hash, name, ratio in (
            d.MultiBuilder(server, "main").call(d.HASH).call(d.NAME).call(d.RATIO).invoke()
        ):
            ...
    """

    kind = EntityKind.DOWNLOAD
    multicall = "d.multicall2"

    def __init__(self: MultiBuilder[()], server: Server, view: str = "main") -> None:
        # d.multicall2 takes an unused target before the view.
        super().__init__(server, "", view)

    def call(self, op: DownloadOp[T]) -> MultiBuilder[Unpack[Ts], T]:
        """New builder with op appended as the last column."""
        return self._append(op)


HASH = DownloadOp("d.hash", STRING)
"""Infohash (SHA1 hex); feed into the f/p/t builders or Download handles."""
NAME = DownloadOp("d.name", STRING)
BASE_FILENAME = DownloadOp("d.base_filename", STRING)
BASE_PATH = DownloadOp("d.base_path", STRING)
DIRECTORY = DownloadOp("d.directory", STRING)
DIRECTORY_BASE = DownloadOp("d.directory_base", STRING)
CHUNK_SIZE = DownloadOp("d.chunk_size", INTEGER)
"""Chunk ("piece") size in bytes."""
COMPLETE = DownloadOp("d.complete", BOOLEAN)
INCOMPLETE = DownloadOp("d.incomplete", BOOLEAN)
COMPLETED_BYTES = DownloadOp("d.completed_bytes", INTEGER)
COMPLETED_CHUNKS = DownloadOp("d.completed_chunks", INTEGER)
DOWN_RATE = DownloadOp("d.down.rate", INTEGER)
DOWN_TOTAL = DownloadOp("d.down.total", INTEGER)
UP_RATE = DownloadOp("d.up.rate", INTEGER)
UP_TOTAL = DownloadOp("d.up.total", INTEGER)
IS_ACTIVE = DownloadOp("d.is_active", BOOLEAN)
IS_OPEN = DownloadOp("d.is_open", BOOLEAN)
IS_CLOSED = DownloadOp("d.is_closed", BOOLEAN)
LOADED_FILE = DownloadOp("d.loaded_file", STRING)
MESSAGE = DownloadOp("d.message", STRING)
"""Error messages from rtorrent or forwarded from the tracker."""
BITFIELD = DownloadOp("d.bitfield", STRING)
RATIO = DownloadOp("d.ratio", FRACTION)
PRIORITY = DownloadOp("d.priority", INTEGER)
"""0 off, 1 low, 2 normal, 3 high."""
SIZE_BYTES = DownloadOp("d.size_bytes", INTEGER)
LEFT_BYTES = DownloadOp("d.left_bytes", INTEGER)
SIZE_FILES = DownloadOp("d.size_files", INTEGER)
STATE = DownloadOp("d.state", BOOLEAN)
"""False when stopped."""
TIED_TO_FILE = DownloadOp("d.tied_to_file", STRING)
TRACKER_SIZE = DownloadOp("d.tracker_size", INTEGER)
GROUP_NAME = DownloadOp("d.group.name", STRING)
CREATION_DATE = DownloadOp("d.creation_date", INTEGER)
LOAD_DATE = DownloadOp("d.load_date", INTEGER)
PEERS_CONNECTED = DownloadOp("d.peers_connected", INTEGER)
