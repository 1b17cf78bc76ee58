"""Models for the arrival and departure times of a service at a location."""

from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .forecast_type import ForecastType

# Signalling systems round to the minute, so anything within this is on time
ON_TIME_TOLERANCE = timedelta(minutes=1)


class LatenessStatus(str, Enum):
    """Whether a service is early, on time or late at a location."""
    EARLY = "early"
    ON_TIME = "on-time"
    LATE = "late"


class Lateness(BaseModel):
    """Difference between the effective and scheduled time."""
    model_config = ConfigDict(frozen=True)

    status: LatenessStatus = Field(..., description="Early, on time or late")
    delta: timedelta = Field(..., description="Effective minus scheduled time (negative when early)")


class TimeRecord(BaseModel):
    """
    Arrival or departure at one location.

    `effective` is chosen by `forecast_type`: the estimated time for Forecast
    and Delayed, the actual time for Actual, and nothing for NoLog/NoReport.
    """
    model_config = ConfigDict(frozen=True)

    scheduled: datetime = Field(..., description="Public scheduled time")
    effective: Optional[datetime] = Field(default=None, description="Estimated or actual time, by forecast type")
    forecast_type: Optional[ForecastType] = Field(default=None, description="How to read the effective time")
    source: Optional[str] = Field(default=None, description="System that provided the time (e.g. TRUST, Darwin)")

    def lateness(self) -> Optional[Lateness]:
        """
        Compare the effective time with the scheduled one.

        Returns:
            Lateness, or None when there is no effective time
        """
        if self.effective is None:
            return None

        delta = self.effective - self.scheduled
        if delta < -ON_TIME_TOLERANCE:
            status = LatenessStatus.EARLY
        elif delta > ON_TIME_TOLERANCE:
            status = LatenessStatus.LATE
        else:
            status = LatenessStatus.ON_TIME
        return Lateness(status=status, delta=delta)


class ServiceTime(BaseModel):
    """Arrival and departure of a service at a location. Either may be absent at the origin or terminus."""
    model_config = ConfigDict(frozen=True)

    arrival: Optional[TimeRecord] = Field(default=None, description="Arrival, absent when there is no scheduled arrival")
    departure: Optional[TimeRecord] = Field(default=None, description="Departure, absent when there is no scheduled departure")

    @property
    def scheduled_arrival(self) -> Optional[datetime]:
        return self.arrival.scheduled if self.arrival else None

    @property
    def scheduled_departure(self) -> Optional[datetime]:
        return self.departure.scheduled if self.departure else None

    @property
    def arrival_time(self) -> Optional[datetime]:
        return self.arrival.effective if self.arrival else None

    @property
    def departure_time(self) -> Optional[datetime]:
        return self.departure.effective if self.departure else None
