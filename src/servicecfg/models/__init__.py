"""Data models for servicecfg."""

from .persistence import PersistenceFailure
from .settings import CodecSettings, LoggingSettings, StorageSettings, StoreSettings

__all__ = [
    "PersistenceFailure",
    "StoreSettings",
    "StorageSettings",
    "CodecSettings",
    "LoggingSettings",
]
