"""In-process key-value tables with the NetworkTables accessor surface."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Dict, List, Protocol, Union, runtime_checkable


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


Value = Union[bool, float]


@runtime_checkable
class TableLike(Protocol):
    """The subset of ``NetworkTable`` the Limelight handle relies on."""

    def getBoolean(self, key: str, defaultValue: bool) -> bool: ...

    def getNumber(self, key: str, defaultValue: float) -> float: ...

    def putNumber(self, key: str, value: float) -> bool: ...


@runtime_checkable
class TableRegistry(Protocol):
    """Anything that hands out named tables, creating them on first lookup."""

    def getTable(self, key: str) -> TableLike: ...


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class InMemoryTable:
    """Lock-protected table of boolean and numeric entries.

    Entries keep the type they were first written with, as NetworkTables
    does: a put of a different type is refused and returns ``False``. Reads
    of a missing key or of an entry with another type return the default.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._lock = threading.RLock()
        self._values: Dict[str, Value] = {}

    @property
    def path(self) -> str:
        """Name the table was registered under."""

        return self._path

    def getBoolean(self, key: str, defaultValue: bool) -> bool:
        with self._lock:
            value = self._values.get(key)
        if isinstance(value, bool):
            return value
        return defaultValue

    def getNumber(self, key: str, defaultValue: float) -> float:
        with self._lock:
            value = self._values.get(key)
        if _is_number(value):
            return value  # type: ignore[return-value]
        return defaultValue

    def putBoolean(self, key: str, value: bool) -> bool:
        if not isinstance(value, bool):
            raise TypeError(f"putBoolean expects a bool, got {type(value).__name__}")
        return self._put(key, value)

    def putNumber(self, key: str, value: float) -> bool:
        if not _is_number(value):
            raise TypeError(f"putNumber expects a number, got {type(value).__name__}")
        return self._put(key, float(value))

    def containsKey(self, key: str) -> bool:
        with self._lock:
            return key in self._values

    def getKeys(self) -> List[str]:
        with self._lock:
            return sorted(self._values)

    def delete(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def _put(self, key: str, value: Value) -> bool:
        with self._lock:
            current = self._values.get(key)
            if current is not None and isinstance(current, bool) != isinstance(value, bool):
                _LOGGER.debug(
                    "Refused %s write to %s/%s holding %s",
                    type(value).__name__,
                    self._path,
                    key,
                    type(current).__name__,
                )
                return False
            self._values[key] = value
        return True

    def __repr__(self) -> str:
        return f"InMemoryTable({self._path!r})"


class InMemoryTableRegistry:
    """Process-local registry returning one shared table per name."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tables: Dict[str, InMemoryTable] = {}

    def getTable(self, key: str) -> InMemoryTable:
        """Return the table registered as ``key``, creating it if needed."""

        with self._lock:
            table = self._tables.get(key)
            if table is None:
                table = InMemoryTable(key)
                self._tables[key] = table
                _LOGGER.debug("Created in-memory table %s", key)
        return table

    def names(self) -> List[str]:
        """Return the names of all tables created so far."""

        with self._lock:
            return sorted(self._tables)


__all__ = ["TableLike", "TableRegistry", "InMemoryTable", "InMemoryTableRegistry"]
