"""Download: a loaded torrent. Accessors correspond to rtorrent's d.* API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rtorrent_rpc.core.accessors import command, getter, setter
from rtorrent_rpc.core.values import BOOLEAN, FRACTION, INTEGER, STRING, decode_str
from rtorrent_rpc.domain.entity import Entity
from rtorrent_rpc.domain.file import File
from rtorrent_rpc.domain.peer import Peer
from rtorrent_rpc.domain.tracker import Tracker
from rtorrent_rpc.multicall import p

if TYPE_CHECKING:
    from rtorrent_rpc.rpc.server import Server


@dataclass(frozen=True)
class Download(Entity):
    """
    Loaded torrent, addressed by its infohash (SHA1 hex).
    Constructing one does not check that the hash exists on the server.

        for dl in server.download_list():
            print(dl.name(), dl.size_bytes() // 1_000_000, "MB, ratio", dl.ratio())
    """

    server: Server
    info_hash: str

    @classmethod
    def from_value(cls, server: Server, value: Any) -> Download:
        return cls(server, decode_str(value))

    @property
    def key(self) -> str:
        return self.info_hash

    def files(self) -> list[File]:
        """Files of this download (a torrent has one or more)."""
        return [File(self, index) for index in range(self.size_files())]

    def trackers(self) -> list[Tracker]:
        return [Tracker(self, index) for index in range(self.tracker_size())]

    def peers(self) -> list[Peer]:
        """Currently connected peers; one p.multicall."""
        rows = p.MultiBuilder(self.server, self).call(p.ID).invoke()
        return [Peer(self, peer_id) for (peer_id,) in rows]

    base_filename = getter("d.base_filename", STRING)
    base_path = getter("d.base_path", STRING)
    directory = getter("d.directory", STRING)
    directory_base = getter("d.directory_base", STRING)
    set_directory = setter("d.directory", STRING, "Move the download's data directory (download must be closed).")
    set_directory_base = setter("d.directory_base", STRING)

    chunk_size = getter("d.chunk_size", INTEGER, "Chunk (piece) size in bytes.")
    complete = getter("d.complete", BOOLEAN, "Is the download complete (100%)?")
    incomplete = getter("d.incomplete", BOOLEAN)
    completed_bytes = getter("d.completed_bytes", INTEGER)
    completed_chunks = getter("d.completed_chunks", INTEGER)

    down_rate = getter("d.down.rate", INTEGER, "Download rate (bytes/s).")
    down_total = getter("d.down.total", INTEGER)
    up_rate = getter("d.up.rate", INTEGER, "Upload rate (bytes/s).")
    up_total = getter("d.up.total", INTEGER)

    is_active = getter("d.is_active", BOOLEAN)
    is_open = getter("d.is_open", BOOLEAN)
    is_closed = getter("d.is_closed", BOOLEAN)

    start = command("d.start")
    stop = command("d.stop")
    open = command("d.open")
    close = command("d.close")
    erase = command(
        "d.erase",
        "Remove the download and its session files from rtorrent. Data on disk is left alone.",
    )
    check_hash = command("d.check_hash", "Hash check the data; the download pauses meanwhile.")
    tracker_announce = command("d.tracker_announce")

    loaded_file = getter("d.loaded_file", STRING, "Metafile the download was created from.")
    message = getter("d.message", STRING, "Error messages from rtorrent or forwarded from the tracker.")
    name = getter("d.name", STRING)
    bitfield = getter("d.bitfield", STRING, "Completed chunks as a string of hex digits.")
    ratio = getter("d.ratio", FRACTION, "Upload/download ratio.")
    priority = getter("d.priority", INTEGER, "0 off, 1 low, 2 normal, 3 high.")
    set_priority = setter("d.priority", INTEGER)
    size_bytes = getter("d.size_bytes", INTEGER)
    left_bytes = getter("d.left_bytes", INTEGER, "Bytes left to verify and/or download.")
    size_files = getter("d.size_files", INTEGER)
    state = getter("d.state", BOOLEAN, "False when stopped.")
    tied_to_file = getter("d.tied_to_file", STRING)
    tracker_size = getter("d.tracker_size", INTEGER)
    group_name = getter("d.group.name", STRING)
    creation_date = getter("d.creation_date", INTEGER, "'creation date' field of the metafile (unix time).")
    load_date = getter("d.load_date", INTEGER)
    peers_connected = getter("d.peers_connected", INTEGER)
