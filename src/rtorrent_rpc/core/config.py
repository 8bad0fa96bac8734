"""Client config: endpoint, timeout and default view; loadable from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

DEFAULT_URL = "http://127.0.0.1/RPC2"


@dataclass(frozen=True)
class Config:
    """
    Connection settings. Build directly or via load_config_from_env();
    pass to Server.from_config(...).
    """

    url: str = DEFAULT_URL
    timeout: float | None = 30.0
    view: str = "main"

    @classmethod
    def load_from_env(cls, prefix: str = "RTORRENT_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Returns dict for Config(**Config.load_from_env())."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                if name in cls.__dataclass_fields__:
                    result[name] = value
        return result


def _timeout(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def load_config_from_env(prefix: str = "RTORRENT_") -> Config:
    """Typed config from RTORRENT_URL, RTORRENT_TIMEOUT, RTORRENT_VIEW. Empty timeout means none."""
    values = Config.load_from_env(prefix)
    if "timeout" in values:
        values["timeout"] = _timeout(values["timeout"])
    return Config(**values)
