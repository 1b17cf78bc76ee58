"""Model for a location in a service's schedule."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .activity import Activity
from .association import Association
from .location import Location
from .service_time import ServiceTime


class ServiceLocation(BaseModel):
    """
    A location in a service's calling pattern. Not every location is stopped at.

    Passing locations (`is_pass`) carry working pass times instead of public
    times and must not be presented as calling points.
    """
    model_config = ConfigDict(frozen=True)

    location: Location = Field(..., description="The location")
    associations: Optional[Tuple[Association, ...]] = Field(default=None, description="Joins, divides and links at this location")
    adhoc_alerts: Optional[Tuple[str, ...]] = Field(default=None, description="Ad-hoc alert texts for this location")
    activities: Optional[Tuple[Activity, ...]] = Field(default=None, description="Activities at this location")
    length: Optional[int] = Field(default=None, description="Train length in coaches, None if unknown")
    detach_front: bool = Field(default=False, description="Whether the front of the train detaches here")
    is_operational: bool = Field(default=False, description="Operational call, times are working times")
    is_pass: bool = Field(default=False, description="Whether the train passes without stopping")
    is_cancelled: bool = Field(default=False, description="Whether the call is cancelled")
    false_destination: Optional[Location] = Field(default=None, description="False destination to display here")
    platform: Optional[int] = Field(default=None, description="Platform number, None if unknown")
    platform_is_hidden: bool = Field(default=False, description="Whether the platform must not be shown to the public")
    is_suppressed: bool = Field(default=False, description="Whether the service is suppressed at this station")
    time: ServiceTime = Field(default_factory=ServiceTime, description="Arrival and departure times")
    raw_lateness: Optional[str] = Field(
        default=None,
        description="Deprecated lateness text from the feed. Use time.arrival/departure lateness() instead",
    )
