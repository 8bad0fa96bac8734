"""
CLI for poking at an rtorrent instance: info, downloads, files, peers, trackers.
Endpoint from --url or RTORRENT_URL; every listing is a single multicall.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace

import typer

from rtorrent_rpc.core.config import Config, load_config_from_env
from rtorrent_rpc.core.errors import RtorrentError
from rtorrent_rpc.multicall import d, f, p, t
from rtorrent_rpc.rpc.server import Server

app = typer.Typer(help="rtorrent-rpc CLI: inspect an rtorrent instance over XML-RPC.")


@contextmanager
def _errors() -> Iterator[None]:
    try:
        yield
    except RtorrentError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1) from e


def _server(ctx: typer.Context) -> Server:
    return ctx.obj["server"]


def _config(ctx: typer.Context) -> Config:
    return ctx.obj["config"]


def _row(*values: object) -> str:
    return "\t".join(str(v) for v in values)


@app.callback()
def main_options(
    ctx: typer.Context,
    url: str | None = typer.Option(None, "--url", "-u", help="Endpoint (default: RTORRENT_URL)"),
    timeout: float | None = typer.Option(None, "--timeout", help="Seconds per call"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every XML-RPC call"),
) -> None:
    """Connect options shared by all commands."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        config = load_config_from_env()
        if url is not None:
            config = replace(config, url=url)
        if timeout is not None:
            config = replace(config, timeout=timeout)
        server = Server.from_config(config)
    except ValueError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(1) from e
    ctx.call_on_close(server.close)
    ctx.obj = {"config": config, "server": server}


@app.command()
def info(ctx: typer.Context) -> None:
    """Hostname, versions and global transfer rates."""
    server = _server(ctx)
    with _errors():
        typer.echo(f"hostname: {server.hostname()}")
        typer.echo(f"rtorrent: {server.client_version()} (libtorrent {server.library_version()})")
        typer.echo(f"api: {server.api_version()}")
        typer.echo(f"down: {server.down_rate()} B/s, up: {server.up_rate()} B/s")


@app.command()
def downloads(
    ctx: typer.Context,
    view: str | None = typer.Option(None, "--view", help="rtorrent view to list (default: RTORRENT_VIEW or main)"),
) -> None:
    """One line per download: hash, name, ratio, size, complete."""
    builder = d.MultiBuilder(_server(ctx), view or _config(ctx).view).call(d.HASH).call(d.NAME).call(d.RATIO)
    with _errors():
        rows = builder.call(d.SIZE_BYTES).call(d.COMPLETE).invoke()
    for info_hash, name, ratio, size, complete in rows:
        typer.echo(_row(info_hash, name, f"{ratio:.3f}", size, "complete" if complete else "incomplete"))


@app.command()
def files(
    ctx: typer.Context,
    info_hash: str = typer.Argument(..., help="Download infohash"),
    glob: str | None = typer.Option(None, "--glob", "-g", help="Only paths matching this glob"),
) -> None:
    """One line per file: path, size, priority."""
    builder = f.MultiBuilder(_server(ctx), info_hash, glob).call(f.PATH).call(f.SIZE_BYTES).call(f.PRIORITY)
    with _errors():
        rows = builder.invoke()
    for path, size, priority in rows:
        typer.echo(_row(path, size, priority))


@app.command()
def peers(
    ctx: typer.Context,
    info_hash: str = typer.Argument(..., help="Download infohash"),
) -> None:
    """One line per connected peer: address, port, client, rates."""
    builder = p.MultiBuilder(_server(ctx), info_hash).call(p.ADDRESS).call(p.PORT).call(p.CLIENT_VERSION)
    with _errors():
        rows = builder.call(p.DOWN_RATE).call(p.UP_RATE).invoke()
    for address, port, client, down, up in rows:
        typer.echo(_row(f"{address}:{port}", client, f"down {down} B/s", f"up {up} B/s"))


@app.command()
def trackers(
    ctx: typer.Context,
    info_hash: str = typer.Argument(..., help="Download infohash"),
) -> None:
    """One line per tracker: url, enabled, peers in last scrape."""
    builder = t.MultiBuilder(_server(ctx), info_hash).call(t.URL).call(t.IS_ENABLED).call(t.LATEST_SUM_PEERS)
    with _errors():
        rows = builder.invoke()
    for url, enabled, peers_seen in rows:
        typer.echo(_row(url, "enabled" if enabled else "disabled", peers_seen))


def main() -> None:
    """Entry point for the rtorrent-rpc console command."""
    app()


if __name__ == "__main__":
    main()
