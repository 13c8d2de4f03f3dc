"""Refresh the metadata store from the remote city source.

The store is only rewritten when ``{source, states}`` changed; the
``lastSyncedAt`` timestamp alone never triggers a write.
"""

import enum
import logging
from dataclasses import dataclass
from datetime import datetime

from config import Settings
from errors import RemoteUnavailable, SchemaMismatch, SyncError
from metadata.models import MetadataDocument
from metadata.store import canonical_json, load_or_default, write_document
from sync.fetch import fetch_city_records
from sync.normalize import normalize

logger = logging.getLogger(__name__)


class SyncStatus(str, enum.Enum):
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    FAILED = "failed"


@dataclass
class SyncResult:
    status: SyncStatus
    error: SyncError | None = None

    @property
    def ok(self) -> bool:
        return self.status != SyncStatus.FAILED

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def has_changed(new: MetadataDocument, current: MetadataDocument) -> bool:
    return canonical_json(new.comparable()) != canonical_json(current.comparable())


def run_sync(settings: Settings, session=None, now: datetime | None = None) -> SyncResult:
    meta_path = settings.meta_path

    try:
        records = fetch_city_records(
            settings.source_url, timeout=settings.sync_timeout, session=session
        )
    except RemoteUnavailable as e:
        logger.error("%s", e)
        return SyncResult(SyncStatus.FAILED, error=e)
    except SchemaMismatch as e:
        logger.error("Unexpected API shape: %s", e)
        return SyncResult(SyncStatus.FAILED, error=e)

    normalized = normalize(records, settings.source_url, now=now)
    current = load_or_default(meta_path, settings.source_url)

    if not has_changed(normalized, current):
        logger.info("No diff detected. %s is up to date.", meta_path.name)
        return SyncResult(SyncStatus.UNCHANGED)

    write_document(meta_path, normalized)
    logger.info(
        "%s updated with latest data (%d states).", meta_path.name, len(normalized.states)
    )
    return SyncResult(SyncStatus.UPDATED)
