"""A UI surface that displays and edits the priority ordering."""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .store import PriorityStore

logger = logging.getLogger(__name__)

Notifier = Callable[[str, str], None]

DIRECTIONS = {"up": -1, "down": 1, -1: -1, 1: 1}

SAVE_FAILED = "Não foi possível salvar a prioridade"


@dataclass
class PriorityCard:
    """One entry of the priority panel."""
    title: str
    subtitle: str
    updated_at: Optional[str] = None


class PriorityConsumer:
    """
    Keeps a local copy of the priority ordering in sync with the store.

    The local copy is replaced (never patched) on activation, after each of
    its own edits, and whenever the store broadcasts a change, including the
    broadcasts this consumer caused itself.
    """

    def __init__(
        self,
        store: PriorityStore,
        limit: Optional[int] = None,
        notifier: Optional[Notifier] = None,
    ):
        limit = store.size if limit is None else limit
        if not 1 <= limit <= store.size:
            raise ValueError(f"limit must be between 1 and {store.size}, got {limit}")

        self.store = store
        self.limit = limit
        self.notifier = notifier
        self._order: List[str] = []
        self._active = False

    @property
    def order(self) -> List[str]:
        return list(self._order)

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> List[str]:
        """Load the current ordering and start listening for changes."""
        self._reload()
        if not self._active:
            self.store.subscribe(self._on_change)
            self._active = True
        return self.order

    def deactivate(self) -> None:
        if self._active:
            self.store.unsubscribe(self._on_change)
            self._active = False

    def move(self, index: int, direction) -> bool:
        """
        Swap an entry with its neighbour.

        Entries past the display limit keep their stored order.

        Args:
            index: Position of the entry in the local ordering
            direction: -1 / "up" or 1 / "down"

        Returns:
            True if the ordering changed, False for an out-of-bounds move
        """
        # bool and float compare equal to 1 but are not directions
        if isinstance(direction, (bool, float)) or direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction: {direction!r}")

        target = index + DIRECTIONS[direction]
        if not (0 <= index < len(self._order)) or not (0 <= target < len(self._order)):
            return False

        updated = list(self._order)
        updated[index], updated[target] = updated[target], updated[index]
        hidden = [title for title in self.store.load() if title not in updated]
        self._order = updated
        if self.store.commit(updated + hidden):
            self._notify("success", "Prioridade atualizada")
        else:
            self._notify("error", SAVE_FAILED)
        return True

    def reset(self) -> List[str]:
        """Restore the canonical ordering."""
        self._order = self.store.canonical[: self.limit]
        if self.store.commit(self.store.canonical):
            self._notify("success", "Prioridade restaurada")
        else:
            self._notify("error", SAVE_FAILED)
        return self.order

    def cards(self, entries: Iterable) -> List[PriorityCard]:
        """Build display cards for the current ordering.

        Args:
            entries: Catalog entries used to enrich each title
        """
        by_code = {}
        for entry in entries:
            by_code.setdefault(entry.nomecodigo, entry)

        cards = []
        for title in self._order:
            match = by_code.get(title)
            cards.append(PriorityCard(
                title=title,
                subtitle=(match.normativo if match and match.normativo else "Definido manualmente"),
                updated_at=match.updated_at if match else None,
            ))
        return cards

    def _on_change(self) -> None:
        self._reload()

    def _reload(self) -> None:
        self._order = self.store.load()[: self.limit]

    def _notify(self, kind: str, message: str) -> None:
        if kind == "error":
            logger.warning(message)
        else:
            logger.info(message)
        if self.notifier is not None:
            self.notifier(kind, message)
