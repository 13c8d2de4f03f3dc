import logging

import requests
from pydantic import TypeAdapter, ValidationError

from errors import RemoteUnavailable, SchemaMismatch
from metadata.models import CityRecord

logger = logging.getLogger(__name__)

HEADERS = {
    "Accept": "application/json",
    "User-Agent": "meta-data-sync/1.0",
}

_records_adapter = TypeAdapter(list[CityRecord])


def validate_records(payload) -> list[CityRecord]:
    """All-or-nothing: one bad row rejects the whole batch."""
    try:
        return _records_adapter.validate_python(payload)
    except ValidationError as e:
        raise SchemaMismatch(str(e)) from e


def fetch_city_records(url: str, timeout: float = 15, session=None) -> list[CityRecord]:
    http = session or requests
    logger.info("Fetching: %s", url)

    try:
        res = http.get(url, headers=HEADERS, timeout=timeout)
    except requests.RequestException as e:
        raise RemoteUnavailable(f"Request to {url} failed: {e}") from e

    if not res.ok:
        raise RemoteUnavailable(
            f"Upstream responded {res.status_code}", status_code=res.status_code
        )

    try:
        payload = res.json()
    except ValueError as e:
        raise SchemaMismatch(f"Response is not JSON: {e}") from e

    return validate_records(payload)
