"""
Exercise catalog models.

Catalog records are read-only reference data for workout generation. They are
created and updated only by the catalog sync job.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ExerciseRecord(BaseModel):
    """A canonical exercise in the catalog."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(description="Catalog-internal identifier")
    api_id: Optional[str] = Field(
        None, description="Identifier in the upstream ExerciseDB source"
    )
    name: str
    body_part: str = Field(description="Body part, e.g. 'chest', 'upper legs'")
    target: str = Field(description="Target muscle, e.g. 'pectorals'")
    equipment: str = Field(description="Equipment tag, e.g. 'dumbbell'")
    instructions: Optional[str] = Field(
        None, description="Newline-separated instruction steps"
    )
    gif_url: Optional[str] = None


class SyncStatus(BaseModel):
    """Whether the catalog has been populated."""

    synced: bool
    count: int = Field(ge=0)


class SyncResult(BaseModel):
    """Outcome of a catalog sync run."""

    count: int = Field(ge=0, description="Number of records written")
    fetched: int = Field(ge=0, description="Number of records read from the source")
    message: str
