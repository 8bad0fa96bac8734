"""Entity: handle to a remote object, identified on the wire by its key."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rtorrent_rpc.rpc.server import Server


class Entity(ABC):
    """
    Handle: server + key. Holds no remote state; every accessor is one round trip.
    Equality by fields (subclasses are frozen dataclasses).
    """

    server: Server

    @property
    @abstractmethod
    def key(self) -> str:
        """Addressing key, sent as the first argument of this object's accessors."""

    def execute(self, method: str, *args: Any) -> Any:
        """Call method with this object as target."""
        return self.server.execute(method, self, *args)
