from pydantic import BaseModel, ConfigDict, Field, StrictStr


class CityRecord(BaseModel):
    # raw upstream row; numbers or nulls are rejected, not coerced
    state: StrictStr
    city: StrictStr


class StateEntry(BaseModel):
    state: str
    cities: list[str] = []


class MetadataDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    last_synced_at: str | None = Field(default=None, alias="lastSyncedAt")
    source: str
    states: list[StateEntry] = []

    def comparable(self) -> dict:
        """Document content without the sync timestamp."""
        data = self.model_dump(by_alias=True)
        data.pop("lastSyncedAt")
        return data
