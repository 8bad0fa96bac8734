"""
MultiBuilder: query several accessors across every object of one collection in a single call.

    rows = d.MultiBuilder(server, "main").call(d.NAME).call(d.RATIO).invoke()
    for name, ratio in rows:
        ...

Each call() returns a new builder one column wider; the row type grows with it
(list[tuple[str, float]] above). Builders are immutable and can be reused.
"""
from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVarTuple, Unpack

from rtorrent_rpc.core.errors import StructureError
from rtorrent_rpc.core.values import as_list
from rtorrent_rpc.multicall.ops import EntityKind, Operation

if TYPE_CHECKING:
    from rtorrent_rpc.rpc.server import Server

logger = logging.getLogger(__name__)

Ts = TypeVarTuple("Ts")


class MultiBuilder(Generic[Unpack[Ts]]):
    """
    Base for the per-kind builders (d/f/p/t). Holds the multicall procedure,
    the two leading arguments (call target, call filter) and the ordered columns.
    Subclasses set kind and multicall and expose a typed call().
    """

    kind: ClassVar[EntityKind]
    multicall: ClassVar[str]

    def __init__(self, server: Server, call_target: str, call_filter: str) -> None:
        self._server = server
        self._call_target = call_target
        self._call_filter = call_filter
        self._columns: tuple[Operation[Any], ...] = ()

    @property
    def server(self) -> Server:
        return self._server

    @property
    def call_target(self) -> str:
        return self._call_target

    @property
    def call_filter(self) -> str:
        return self._call_filter

    @property
    def columns(self) -> tuple[Operation[Any], ...]:
        return self._columns

    @property
    def arity(self) -> int:
        return len(self._columns)

    def _append(self, op: Operation[Any]) -> Any:
        if op.kind is not self.kind:
            got = op.kind.name.lower() if op.kind is not None else "untagged"
            raise TypeError(
                f"{op.name!r} is a {got} operation; this builder queries {self.kind.name.lower()}s"
            )
        extended = copy.copy(self)
        extended._columns = self._columns + (op,)
        return extended

    def request(self) -> tuple[str, tuple[str, ...]]:
        """(procedure, params) that invoke() sends."""
        params = (self._call_target, self._call_filter) + tuple(op.argument for op in self._columns)
        return self.multicall, params

    def invoke(self) -> list[tuple[Unpack[Ts]]]:
        """
        Run the query: one row per target object, in server order, one value per column.
        Any malformed row or value raises StructureError and no rows are returned.
        """
        if not self._columns:
            raise ValueError("multicall needs at least one column; add one with call()")
        method, params = self.request()
        rows = as_list(self._server.execute(method, *params))
        result = [self._decode_row(row) for row in rows]
        logger.debug("%s %r: %d columns, %d rows", method, self._call_filter, self.arity, len(result))
        return result

    def _decode_row(self, row: Any) -> Any:
        values = as_list(row)
        if len(values) != len(self._columns):
            raise StructureError(
                f"row has {len(values)} columns, expected {len(self._columns)} ({values!r})"
            )
        decoded = []
        for op, value in zip(self._columns, values):
            try:
                decoded.append(op.scalar.decode(value))
            except StructureError as e:
                raise StructureError(f"column {op.name}: {e.message}") from e
        return tuple(decoded)

    def __repr__(self) -> str:
        names = ", ".join(op.name for op in self._columns)
        return (
            f"{type(self).__module__.rsplit('.', 1)[-1]}.{type(self).__name__}"
            f"({self._call_target!r}, {self._call_filter!r}, [{names}])"
        )
