"""Forecast types for arrival and departure times."""

from enum import Enum


class ForecastType(str, Enum):
    """
    How a location's effective arrival or departure time should be read.

    Values are the literals used by the feed's arrivalType/departureType.
    """
    # The time is a live estimate (eta/etd)
    ESTIMATED = "Forecast"
    # The time is what actually happened (ata/atd)
    ACTUAL = "Actual"
    # Darwin knows the service has passed but received no movement report here
    NO_LOG = "NoLog"
    # Darwin does not know whether the service has passed this location
    NO_REPORT = "NoReport"
    # Unknown delay, estimates are uncertain and should not be shown to the public
    DELAYED = "Delayed"
