"""Handles for rtorrent's remote objects: Download, File, Peer, Tracker."""
from rtorrent_rpc.domain.download import Download
from rtorrent_rpc.domain.entity import Entity
from rtorrent_rpc.domain.file import File
from rtorrent_rpc.domain.peer import Peer
from rtorrent_rpc.domain.tracker import Tracker

__all__ = [
    "Entity",
    "Download",
    "File",
    "Peer",
    "Tracker",
]
