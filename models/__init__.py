"""
Models for the LDBSV service details parser.

This package contains the frozen Pydantic models a GetServiceDetails
document is parsed into, plus the error model returned by the client.
"""

from .activity import Activity
from .association import Association, AssociationCategory
from .forecast_type import ForecastType
from .location import Location
from .service_time import Lateness, LatenessStatus, ServiceTime, TimeRecord
from .service_location import ServiceLocation
from .service_details import ServiceDetails
from .service_details_error import ServiceDetailsError

__all__ = [
    'Activity',
    'Association',
    'AssociationCategory',
    'ForecastType',
    'Location',
    'Lateness',
    'LatenessStatus',
    'ServiceTime',
    'TimeRecord',
    'ServiceLocation',
    'ServiceDetails',
    'ServiceDetailsError',
]
