"""Table registries: in-process tables and the NetworkTables adapter."""

from .memory import InMemoryTable, InMemoryTableRegistry, TableLike, TableRegistry
from .nt_registry import NetworkTablesRegistry, default_registry

__all__ = [
    "InMemoryTable",
    "InMemoryTableRegistry",
    "TableLike",
    "TableRegistry",
    "NetworkTablesRegistry",
    "default_registry",
]
