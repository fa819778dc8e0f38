"""Table registry backed by the process-wide pynetworktables instance."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Optional

from networktables import NetworkTables

from limelight_nt.core.config import LimelightConfig
from limelight_nt.tables.memory import TableLike


_LOGGER = logging.getLogger(__name__)
if not _LOGGER.handlers:
    _LOGGER.setLevel(logging.INFO)
    _LOG_PATH = Path(__file__).resolve().parents[2] / "log.txt"
    try:
        _LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        _FILE_HANDLER = logging.FileHandler(_LOG_PATH, encoding="utf-8")
        _FILE_HANDLER.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        _LOGGER.addHandler(_FILE_HANDLER)
    except OSError:
        _LOGGER.addHandler(logging.NullHandler())
else:
    _LOGGER.addHandler(logging.NullHandler())


class NetworkTablesRegistry:
    """Hands out tables from a NetworkTables backend.

    The backend defaults to the global ``NetworkTables`` object; tests pass a
    stand-in with the same ``initialize`` / ``getTable`` / ``isConnected``
    methods.
    """

    def __init__(self, backend: Any = None) -> None:
        self._backend = backend if backend is not None else NetworkTables

    @classmethod
    def from_config(
        cls, config: LimelightConfig, backend: Any = None
    ) -> "NetworkTablesRegistry":
        """Build a registry and start a client if ``config`` names a server."""

        registry = cls(backend)
        server = config.resolved_server()
        if server is not None:
            registry.start_client(server)
        return registry

    def start_client(self, server: str) -> bool:
        """Connect to ``server`` as a NetworkTables client.

        Returns ``False`` when the backend was already initialised; the
        existing connection is left untouched in that case.
        """

        started = bool(self._backend.initialize(server=server))
        if started:
            _LOGGER.info("NetworkTables client started for %s", server)
        else:
            _LOGGER.warning(
                "NetworkTables already initialised, ignoring server %s", server
            )
        return started

    def getTable(self, key: str) -> TableLike:
        """Return the backend table named ``key``."""

        return self._backend.getTable(key)

    def is_connected(self) -> bool:
        return bool(self._backend.isConnected())


_DEFAULT_LOCK = threading.Lock()
_default: Optional[NetworkTablesRegistry] = None


def default_registry() -> NetworkTablesRegistry:
    """Return the shared registry over the global NetworkTables instance."""

    global _default
    with _DEFAULT_LOCK:
        if _default is None:
            _default = NetworkTablesRegistry()
            _LOGGER.debug("Default NetworkTables registry created")
        return _default


__all__ = ["NetworkTablesRegistry", "default_registry"]
