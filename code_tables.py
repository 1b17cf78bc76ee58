"""
Fixed lookup tables used while parsing service details.

- Activity codes: a packed string of 2-character CIF activity codes
- Forecast types: which time field holds the effective arrival/departure
- Association categories
- CIF train categories (for display)
"""

from typing import Dict, List, Optional, Tuple

from field_coercion import optional, require_text, require_timestamp
from models import Activity, AssociationCategory, ForecastType, TimeRecord
from parsing_errors import InvalidActivity, InvalidAssociationCategory, InvalidForecast
from traversable import Traversable

ACTIVITY_CHUNK = 2

# (scheduled, forecast type, estimated, actual, source) tag names per direction
TIME_FIELDS: Dict[str, Tuple[str, str, str, str, str]] = {
    'arrival': ('sta', 'arrivalType', 'eta', 'ata', 'arrivalSource'),
    'departure': ('std', 'departureType', 'etd', 'atd', 'departureSource'),
}

# https://wiki.openraildata.com/index.php?title=CIF_Codes
TRAIN_CATEGORIES: Dict[str, str] = {
    'OL': 'London Underground/Metro Service',
    'OU': 'Unadvertised Ordinary Passenger',
    'OO': 'Ordinary Passenger',
    'OS': 'Staff Train',
    'XC': 'Channel Tunnel',
    'XD': 'Sleeper',
    'XI': 'International',
    'XR': 'Motorail',
    'XU': 'Unadvertised Express',
    'XX': 'Express Passenger',
    'XZ': 'Sleeper (Domestic)',
    'BR': 'Rail replacement bus',
    'BS': 'Bus',
    'SS': 'Ship',
    'EE': 'Empty Coaching Stock (ECS)',
    'EL': 'ECS, London Underground/Metro Service',
    'ES': 'ECS and Staff',
    'JJ': 'Postal',
    'PM': 'Post Office Controlled Parcels',
    'PP': 'Parcels',
    'PV': 'Empty NPCCS',
    'DD': 'Departmental',
    'DH': 'Civil Engineer',
    'DI': 'Mechanical & Electrical Engineer',
    'DQ': 'Stores',
    'DT': 'Test',
    'DY': 'Signal & Telecommunications Engineer',
    'ZB': 'Locomotive & Brake Van',
    'ZZ': 'Light Locomotive',
    'J2': 'RfD Automotive (Components)',
    'H2': 'RfD Automotive (Vehicles)',
    'J3': 'RfD Edible Products (UK Contracts)',
    'J4': 'RfD Industrial Minerals (UK Contracts)',
    'J5': 'RfD Chemicals (UK Contracts)',
    'J6': 'RfD Building Materials (UK Contracts)',
    'J8': 'RfD General Merchandise (UK Contracts)',
    'H8': 'RfD European',
    'J9': 'RfD Freightliner (Contracts)',
    'H9': 'RfD Freightliner (Other)',
    'A0': 'Coal (Distributive)',
    'E0': 'Coal (Electricity) MGR',
    'B0': 'Coal (Other) and Nuclear',
    'B1': 'Metals',
    'B4': 'Aggregates',
    'B5': 'Domestic and Industrial Waste',
    'B6': 'Building Materials (TLF)',
    'B7': 'Petroleum Products',
    'H0': 'RfD European Channel Tunnel (Mixed Business)',
    'H1': 'RfD European Channel Tunnel Intermodal',
    'H3': 'RfD European Channel Tunnel Automotive',
    'H4': 'RfD European Channel Tunnel Contract Services',
    'H5': 'RfD European Channel Tunnel Haulmark',
    'H6': 'RfD European Channel Tunnel Joint Venture',
}


def decode_activities(text: str) -> Optional[Tuple[Activity, ...]]:
    """
    Decode a packed activity string such as "TBTF" or "T D ".

    The string is read in 2-character chunks (the last may be shorter), each
    stripped and looked up in the Activity table. A blank chunk means no
    activity; runs of adjacent blank chunks collapse to a single marker.

    Args:
        text: Content of the activities field

    Returns:
        Tuple of activities in order, or None if the field is empty

    Raises:
        InvalidActivity: If a chunk is not a known activity code
    """
    if text == '':
        return None

    activities: List[Activity] = []
    for start in range(0, len(text), ACTIVITY_CHUNK):
        code = text[start:start + ACTIVITY_CHUNK].strip()
        try:
            activity = Activity(code)
        except ValueError:
            raise InvalidActivity(code)

        if activity is Activity.NONE and activities and activities[-1] is Activity.NONE:
            continue
        activities.append(activity)

    return tuple(activities)


def parse_forecast_type(text: Optional[str]) -> Optional[ForecastType]:
    """Map an arrivalType/departureType value to a ForecastType. None stays None."""
    if text is None:
        return None
    try:
        return ForecastType(text)
    except ValueError:
        raise InvalidForecast(text)


def parse_association_category(text: str) -> AssociationCategory:
    try:
        return AssociationCategory(text)
    except ValueError:
        raise InvalidAssociationCategory(text)


def resolve_time_record(node: Traversable, direction: str) -> Optional[TimeRecord]:
    """
    Build the arrival or departure record of a location.

    Args:
        node: The location node
        direction: 'arrival' or 'departure'

    Returns:
        TimeRecord, or None when the location has no scheduled time in that direction

    Raises:
        InvalidForecast: If the forecast type is present but unknown
    """
    scheduled_tag, type_tag, estimated_tag, actual_tag, source_tag = TIME_FIELDS[direction]

    forecast_type = parse_forecast_type(optional(require_text, node, type_tag))

    scheduled = optional(require_timestamp, node, scheduled_tag)
    if scheduled is None:
        return None

    effective = None
    if forecast_type in (ForecastType.ESTIMATED, ForecastType.DELAYED):
        effective = optional(require_timestamp, node, estimated_tag)
    elif forecast_type is ForecastType.ACTUAL:
        effective = optional(require_timestamp, node, actual_tag)

    return TimeRecord(
        scheduled=scheduled,
        effective=effective,
        forecast_type=forecast_type,
        source=optional(require_text, node, source_tag),
    )


def describe_category(code: str) -> str:
    """Human-readable name of a CIF train category, or 'unknown'."""
    return TRAIN_CATEGORIES.get(code, 'unknown')
