from datetime import datetime, timezone
from typing import Iterable

from metadata.models import CityRecord, MetadataDocument, StateEntry


class OrderedSet:
    """Insertion-ordered set with exact (case-sensitive) equality."""

    def __init__(self, items: Iterable[str] = ()):
        self._items: dict[str, None] = {}
        for item in items:
            self.add(item)

    def add(self, item: str) -> None:
        self._items.setdefault(item, None)

    def sorted(self) -> list[str]:
        return sorted(self._items)


def utc_timestamp(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def group_states(records: Iterable[CityRecord]) -> list[StateEntry]:
    grouped: dict[str, OrderedSet] = {}

    for r in records:
        state = r.state.strip()
        city = r.city.strip()
        grouped.setdefault(state, OrderedSet()).add(city)

    return [
        StateEntry(state=state, cities=grouped[state].sorted())
        for state in sorted(grouped)
    ]


def normalize(records: Iterable[CityRecord], source: str, now: datetime | None = None) -> MetadataDocument:
    return MetadataDocument(
        last_synced_at=utc_timestamp(now),
        source=source,
        states=group_states(records),
    )
