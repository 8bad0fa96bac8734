"""Config loading from the environment."""
from rtorrent_rpc import Config, load_config_from_env


def test_defaults(monkeypatch):
    for name in ("RTORRENT_URL", "RTORRENT_TIMEOUT", "RTORRENT_VIEW"):
        monkeypatch.delenv(name, raising=False)
    assert load_config_from_env() == Config()


def test_load_from_env(monkeypatch):
    monkeypatch.setenv("RTORRENT_URL", "scgi://10.0.0.2:5000")
    monkeypatch.setenv("RTORRENT_TIMEOUT", "2.5")
    monkeypatch.setenv("RTORRENT_VIEW", "seeding")
    config = load_config_from_env()
    assert config.url == "scgi://10.0.0.2:5000"
    assert config.timeout == 2.5
    assert config.view == "seeding"


def test_empty_timeout_means_none(monkeypatch):
    monkeypatch.setenv("RTORRENT_TIMEOUT", "")
    assert load_config_from_env().timeout is None


def test_unknown_keys_are_ignored(monkeypatch):
    monkeypatch.setenv("RTORRENT_SESSION", "/var/lib/rtorrent")
    assert "session" not in Config.load_from_env()


def test_custom_prefix_and_defaults(monkeypatch):
    monkeypatch.setenv("SEEDBOX_URL", "http://seedbox/RPC2")
    values = Config.load_from_env("SEEDBOX_", view="main")
    assert values == {"view": "main", "url": "http://seedbox/RPC2"}
    assert load_config_from_env("SEEDBOX_").url == "http://seedbox/RPC2"
