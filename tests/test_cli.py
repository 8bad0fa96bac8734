"""CLI commands against a fake rtorrent."""
import xmlrpc.client

import pytest
from typer.testing import CliRunner

from rtorrent_rpc.cli.main import app

from conftest import INFO_HASH, FakeTransport

runner = CliRunner()


@pytest.fixture
def fake(monkeypatch):
    transport = FakeTransport()
    monkeypatch.setattr("rtorrent_rpc.rpc.server.transport_for", lambda endpoint, timeout=None: transport)
    return transport


def test_info(fake):
    fake.responses.update(
        {
            "system.hostname": "seedbox",
            "system.client_version": "0.9.8",
            "system.library_version": "0.13.8",
            "system.api_version": "10",
            "throttle.global_down.rate": 100,
            "throttle.global_up.rate": 50,
        }
    )
    result = runner.invoke(app, ["--url", "http://rt/RPC2", "info"])
    assert result.exit_code == 0, result.output
    assert "hostname: seedbox" in result.output
    assert "rtorrent: 0.9.8 (libtorrent 0.13.8)" in result.output


def test_downloads(fake):
    fake.responses["d.multicall2"] = [[INFO_HASH, "debian.iso", 1500, 1000, 1]]
    result = runner.invoke(app, ["downloads", "--view", "seeding"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [f"{INFO_HASH}\tdebian.iso\t1.500\t1000\tcomplete"]
    method, params = fake.requests[0]
    assert params[:2] == ("", "seeding")


def test_files_with_glob(fake):
    fake.responses["f.multicall"] = [["a.iso", 10, 1]]
    result = runner.invoke(app, ["files", INFO_HASH, "--glob", "*.iso"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["a.iso\t10\t1"]
    assert fake.requests[0][1] == (INFO_HASH, "*.iso", "f.path=", "f.size_bytes=", "f.priority=")


def test_peers_and_trackers(fake):
    fake.responses["p.multicall"] = [["1.2.3.4", 51413, "Transmission 4.0", 10, 20]]
    fake.responses["t.multicall"] = [["udp://t.example:80", 1, 42]]
    peers = runner.invoke(app, ["peers", INFO_HASH])
    trackers = runner.invoke(app, ["trackers", INFO_HASH])
    assert "1.2.3.4:51413\tTransmission 4.0" in peers.output
    assert trackers.output.splitlines() == ["udp://t.example:80\tenabled\t42"]


def test_errors_exit_nonzero(fake):
    fake.responses["d.multicall2"] = xmlrpc.client.Fault(-506, "invalid view")
    result = runner.invoke(app, ["downloads", "--view", "nope"])
    assert result.exit_code == 1
    assert "invalid view" in result.output


def test_default_view_from_env(fake, monkeypatch):
    monkeypatch.setenv("RTORRENT_VIEW", "started")
    fake.responses["d.multicall2"] = []
    result = runner.invoke(app, ["downloads"])
    assert result.exit_code == 0, result.output
    assert result.output == ""
    assert fake.requests[0][1][:2] == ("", "started")


def test_incomplete_scgi_url_exits_with_error():
    result = runner.invoke(app, ["--url", "scgi://localhost", "info"])
    assert result.exit_code == 1
    assert "scgi endpoint needs host and port" in result.output


def test_bad_timeout_from_env_exits_with_error(monkeypatch):
    monkeypatch.setenv("RTORRENT_TIMEOUT", "soon")
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 1
    assert "error:" in result.output
