"""Model for the details of one train service."""

from datetime import date, datetime
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .service_location import ServiceLocation


class ServiceDetails(BaseModel):
    """Full schedule and real-time state of a train service, in schedule order."""
    model_config = ConfigDict(frozen=True)

    generated_at: datetime = Field(..., description="When Darwin generated these details")
    service_type: str = Field(default="train", description="Service type, always 'train'")
    rid: str = Field(..., description="RTTI ID of this service")
    uid: str = Field(..., description="Train UID, or an RTTI allocated replacement")
    rsid: Optional[str] = Field(default=None, description="Retail service ID, if known")
    trainid: str = Field(..., description="Train ID (headcode)")
    sdd: date = Field(..., description="Scheduled departure date")
    is_passenger_service: bool = Field(default=True, description="Non-passenger services should not be shown to the public")
    is_charter: bool = Field(default=False, description="Whether this is a charter service")
    category: str = Field(..., description="CIF train category code (e.g. OO, XX)")
    operator: str = Field(..., description="Train operating company")
    operator_code: str = Field(..., description="Operator code")
    cancel_reason: Optional[str] = Field(default=None, description="Reason for cancellation")
    delay_reason: Optional[str] = Field(default=None, description="Reason for delay")
    is_reverse_formation: bool = Field(default=False, description="Whether the train runs in reverse formation")
    locations: Tuple[ServiceLocation, ...] = Field(default=(), description="Locations in schedule order")
