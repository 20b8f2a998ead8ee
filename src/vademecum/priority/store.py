"""Persisted, reconciled ordering of priority documents.

The store owns the canonical default ordering and the user's customized
ordering. Whatever is found in storage is reconciled against the canonical
set before it is returned, so callers always get exactly N unique canonical
titles.
"""

import json
import logging
from collections.abc import Sequence
from typing import Any, List, Optional

from ..errors import StorageError
from .defaults import DEFAULT_VADE_PRIORITY, PRIORITY_CHANGED, STORAGE_KEY
from .signals import ChangeSignal, Listener, get_signal
from .storage import KeyValueStorage

logger = logging.getLogger(__name__)


def reconcile(order: Any, canonical: Sequence[str] = DEFAULT_VADE_PRIORITY) -> List[str]:
    """
    Turn arbitrary input into a valid priority list.

    Non-string values and titles outside the canonical set are dropped,
    duplicates keep their first position, and canonical titles that are
    missing are appended in canonical order. An input that leaves nothing
    after filtering yields the canonical order.

    Args:
        order: Any value, usually a decoded JSON array
        canonical: The canonical default ordering

    Returns:
        A new list holding every canonical title exactly once
    """
    if isinstance(order, (str, bytes)) or not isinstance(order, Sequence):
        return list(canonical)

    allowed = set(canonical)
    unique: List[str] = []
    seen = set()
    for item in order:
        if not isinstance(item, str) or item not in allowed or item in seen:
            continue
        seen.add(item)
        unique.append(item)

    if not unique:
        return list(canonical)

    missing = [item for item in canonical if item not in seen]
    return unique + missing


class PriorityStore:
    """Repository for the shared priority ordering.

    Consumers never share the list object; they share this store and
    re-load whenever the change signal fires.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        signal: Optional[ChangeSignal] = None,
        canonical: Sequence[str] = DEFAULT_VADE_PRIORITY,
        key: str = STORAGE_KEY,
    ):
        self.storage = storage
        self.signal = signal or get_signal(PRIORITY_CHANGED)
        self.canonical = list(canonical)
        self.key = key

    @property
    def size(self) -> int:
        return len(self.canonical)

    def reconcile(self, order: Any) -> List[str]:
        return reconcile(order, self.canonical)

    def load(self) -> List[str]:
        """Read the persisted ordering.

        Returns:
            The reconciled ordering, or the canonical default when nothing
            usable is stored
        """
        try:
            stored = self.storage.get_item(self.key)
        except StorageError as e:
            logger.warning(f"Failed to read priority list: {e}")
            return list(self.canonical)

        if not stored:
            return list(self.canonical)

        try:
            parsed = json.loads(stored)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Stored priority list is not valid JSON: {e}")
            return list(self.canonical)

        return self.reconcile(parsed)

    def save(self, order: Any) -> List[str]:
        """Reconcile, persist and broadcast a new ordering.

        The broadcast happens only after the write completed, so listeners
        that re-load observe the value just written. A failed write is logged
        and nothing is broadcast.

        Returns:
            The reconciled ordering
        """
        completed = self.reconcile(order)
        self._persist(completed)
        return completed

    def commit(self, order: Any) -> bool:
        """Like save(), but report whether the ordering was written.

        Returns:
            True when the write succeeded and listeners were notified
        """
        return self._persist(self.reconcile(order))

    def _persist(self, completed: List[str]) -> bool:
        try:
            self.storage.set_item(self.key, json.dumps(completed, ensure_ascii=False))
        except StorageError as e:
            logger.warning(f"Failed to persist priority list: {e}")
            return False

        self.signal.emit()
        return True

    def reset(self) -> List[str]:
        """Persist and broadcast the canonical ordering."""
        return self.save(self.canonical)

    def subscribe(self, listener: Listener) -> None:
        self.signal.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self.signal.unsubscribe(listener)
