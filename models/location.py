"""Model for a location referenced by a service."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A named location, identified by CRS and/or TIPLOC when known."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Location name")
    crs: Optional[str] = Field(default=None, description="CRS code")
    tiploc: Optional[str] = Field(default=None, description="TIPLOC code")
