"""Referential integrity checks against the event store."""

from events.domain import EventId
from events.stores.interfaces import EventStore


class ReferentialIntegrityChecker:
    """Confirms that a referenced event exists at call time.

    Every call hits the store; results are never cached. There is no lock
    between this check and the write that follows it, so an event deleted
    in between can still be referenced. The foreign key on the booking
    table is the last line of defence for that window.
    """

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def event_exists(self, event_id: EventId) -> bool:
        """Return whether the event exists.

        Raises:
            StorageUnavailableError: If the store cannot be reached.
        """
        return self._store.event_exists(event_id)
