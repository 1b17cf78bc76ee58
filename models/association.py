"""Model for an association between two train services."""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .location import Location


class AssociationCategory(str, Enum):
    """What happens between this service and the associated one."""
    JOIN = "join"
    DIVIDE = "divide"
    NEXT = "next"
    LINKED_FROM = "link-from"
    LINKED_TO = "link-to"


class Association(BaseModel):
    """
    A join, divide or link with another service at a location.

    `rid` and `uid` identify the other service. They are plain identifiers;
    fetch that service separately if its details are needed.
    """
    model_config = ConfigDict(frozen=True)

    category: AssociationCategory = Field(..., description="Association category")
    rid: str = Field(..., description="RTTI ID of the associated service")
    uid: str = Field(..., description="Train UID of the associated service")
    trainid: str = Field(..., description="Headcode of the associated service")
    rsid: Optional[str] = Field(default=None, description="Retail service ID, if known")
    sdd: date = Field(..., description="Scheduled departure date of the associated service")
    origin: Optional[Location] = Field(default=None, description="Origin of the associated service")
    destination: Optional[Location] = Field(default=None, description="Destination of the associated service")
    is_cancelled: bool = Field(default=False, description="Whether the association will no longer happen")
