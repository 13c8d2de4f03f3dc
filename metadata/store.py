"""Read and write the on-disk metadata document.

Readers never observe a partial file: writes go to a temporary file in the
same directory and are moved into place with ``os.replace``.
"""

import json
import logging
import os
import stat
import tempfile
from pathlib import Path

from pydantic import ValidationError

from errors import StoreUnreadable
from metadata.models import MetadataDocument

logger = logging.getLogger(__name__)


def canonical_json(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def empty_document(source: str) -> MetadataDocument:
    return MetadataDocument(last_synced_at=None, source=source, states=[])


def _reject_constant(name):
    raise ValueError(f"invalid JSON constant {name}")


def read_raw(path: Path):
    """Return the parsed JSON content of the store."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f, parse_constant=_reject_constant)
    except (OSError, ValueError) as e:
        raise StoreUnreadable(f"cannot read {path}: {e}") from e


def read_document(path: Path) -> MetadataDocument:
    data = read_raw(path)
    try:
        return MetadataDocument.model_validate(data)
    except ValidationError as e:
        raise StoreUnreadable(f"{path} is not a metadata document: {e}") from e


def load_or_default(path: Path, source: str) -> MetadataDocument:
    try:
        return read_document(path)
    except StoreUnreadable as e:
        logger.warning("Using empty metadata: %s", e)
        return empty_document(source)


def _file_mode(path: Path) -> int:
    # keep the current mode; a new file gets what a plain open() would give it
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_document(path: Path, document: MetadataDocument) -> None:
    text = canonical_json(document.model_dump(by_alias=True)) + "\n"

    path.parent.mkdir(parents=True, exist_ok=True)
    mode = _file_mode(path)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
