"""Multicall operations: (accessor, scalar type) pairs, tagged with the entity kind they apply to."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Generic, TypeVar

from rtorrent_rpc.core.values import ScalarType

T = TypeVar("T")


class EntityKind(Enum):
    """The four collections a multicall can range over; value is the accessor namespace."""

    DOWNLOAD = "d"
    FILE = "f"
    PEER = "p"
    TRACKER = "t"


@dataclass(frozen=True)
class Operation(Generic[T]):
    """
    One multicall column: accessor name (e.g. "d.ratio") and the scalar type it yields.
    Subclassed once per entity kind; instances are module-level constants.
    """

    name: str
    scalar: ScalarType[T]

    kind: ClassVar[EntityKind | None] = None

    def __post_init__(self) -> None:
        if self.kind is not None and not self.name.startswith(f"{self.kind.value}."):
            raise ValueError(f"{self.name!r} is not a {self.kind.name.lower()} accessor")

    @property
    def argument(self) -> str:
        """Multicall argument for this column; trailing "=" selects the getter."""
        return f"{self.name}="
