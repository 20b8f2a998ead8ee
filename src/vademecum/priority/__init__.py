"""Persisted priority ordering shared between independent consumers."""

from .defaults import DEFAULT_VADE_PRIORITY, STORAGE_KEY, PRIORITY_CHANGED
from .signals import ChangeSignal, get_signal
from .storage import KeyValueStorage, MemoryStorage, JsonFileStorage
from .store import PriorityStore, reconcile
from .consumer import PriorityConsumer, PriorityCard

__all__ = [
    "DEFAULT_VADE_PRIORITY",
    "STORAGE_KEY",
    "PRIORITY_CHANGED",
    "ChangeSignal",
    "get_signal",
    "KeyValueStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "PriorityStore",
    "reconcile",
    "PriorityConsumer",
    "PriorityCard",
]
