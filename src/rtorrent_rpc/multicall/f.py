"""f.* multicall: query the files of one download (f.multicall)."""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar, TypeVarTuple, Unpack

from rtorrent_rpc.core.values import INTEGER, STRING
from rtorrent_rpc.multicall import builder
from rtorrent_rpc.multicall.ops import EntityKind, Operation

if TYPE_CHECKING:
    from rtorrent_rpc.domain.download import Download
    from rtorrent_rpc.rpc.server import Server

T = TypeVar("T")
Ts = TypeVarTuple("Ts")


class FileOp(Operation[T]):
    """An f.* operation for multicalls."""

    kind = EntityKind.FILE


class MultiBuilder(builder.MultiBuilder[Unpack[Ts]]):
    """
    Query across the files of a download, identified by infohash or Download handle.
    glob filters files by path (e.g. "*.iso"); None means every file.
    """

    kind = EntityKind.FILE
    multicall = "f.multicall"

    def __init__(
        self: MultiBuilder[()], server: Server, download: Download | str, glob: str | None = None
    ) -> None:
        target = download if isinstance(download, str) else download.key
        super().__init__(server, target, glob or "")

    def call(self, op: FileOp[T]) -> MultiBuilder[Unpack[Ts], T]:
        return self._append(op)


COMPLETED_CHUNKS = FileOp("f.completed_chunks", INTEGER)
"""Completed chunks touching this file, including chunks shared with neighbours."""
FROZEN_PATH = FileOp("f.frozen_path", STRING)
"""Absolute path."""
OFFSET = FileOp("f.offset", INTEGER)
"""Byte offset of the file from the start of the torrent data."""
PATH = FileOp("f.path", STRING)
"""Path relative to the download's base path."""
PRIORITY = FileOp("f.priority", INTEGER)
"""0 off (do not download), 1 normal, 2 high."""
SIZE_BYTES = FileOp("f.size_bytes", INTEGER)
SIZE_CHUNKS = FileOp("f.size_chunks", INTEGER)
