"""Type-checked by test_typing.py, never executed."""
from typing import assert_type

from rtorrent_rpc import Server
from rtorrent_rpc.multicall import d, f, p, t

server = Server("http://127.0.0.1/RPC2")

builder = d.MultiBuilder(server, "main")
assert_type(builder, d.MultiBuilder[()])
assert_type(builder.call(d.NAME).call(d.RATIO).invoke(), list[tuple[str, float]])
assert_type(
    builder.call(d.HASH).call(d.COMPLETE).call(d.SIZE_BYTES).invoke(),
    list[tuple[str, bool, int]],
)
assert_type(f.MultiBuilder(server, "ABCD", "*.iso").call(f.PATH).invoke(), list[tuple[str]])
assert_type(p.MultiBuilder(server, "ABCD").call(p.ADDRESS).call(p.PORT).invoke(), list[tuple[str, int]])
assert_type(t.MultiBuilder(server, "ABCD").call(t.URL).call(t.IS_ENABLED).invoke(), list[tuple[str, bool]])
