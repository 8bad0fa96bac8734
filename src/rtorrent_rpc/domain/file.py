"""File: one file of a download. Accessors correspond to rtorrent's f.* API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rtorrent_rpc.core.accessors import getter, setter
from rtorrent_rpc.core.values import INTEGER, STRING
from rtorrent_rpc.domain.entity import Entity

if TYPE_CHECKING:
    from rtorrent_rpc.domain.download import Download
    from rtorrent_rpc.rpc.server import Server


@dataclass(frozen=True)
class File(Entity):
    """File at position index within its download; key "<infohash>:f<index>"."""

    download: Download
    index: int

    @property
    def server(self) -> Server:  # type: ignore[override]
        return self.download.server

    @property
    def key(self) -> str:
        return f"{self.download.key}:f{self.index}"

    completed_chunks = getter(
        "f.completed_chunks",
        INTEGER,
        "Completed chunks touching this file, including chunks shared with neighbours.",
    )
    frozen_path = getter("f.frozen_path", STRING, "Absolute path of the file.")
    offset = getter("f.offset", INTEGER, "Byte offset of the file from the start of the torrent data.")
    path = getter("f.path", STRING, "Path relative to the download's base path.")
    priority = getter("f.priority", INTEGER, "0 off (do not download), 1 normal, 2 high.")
    set_priority = setter("f.priority", INTEGER)
    size_bytes = getter("f.size_bytes", INTEGER)
    size_chunks = getter("f.size_chunks", INTEGER)
