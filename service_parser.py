"""
Service details parser.

Turns a GetServiceDetails response (usually a whole SOAP envelope) into a
ServiceDetails model. Parsing is fail-fast for the whole document: any
mandatory field that is missing or malformed anywhere in the tree raises a
ParsingError and no partial result is returned.

Usage:
    from service_parser import parse_service_details

    details = parse_service_details(response_text)
    for stop in details.locations:
        print(stop.location.name, stop.time.departure_time)
"""

import logging
from typing import Optional, Tuple, Union

from code_tables import decode_activities, parse_association_category, resolve_time_record
from field_coercion import (
    optional,
    optional_bool,
    require_date,
    require_text,
    require_timestamp,
    require_unsigned,
)
from models import (
    Association,
    Location,
    ServiceDetails,
    ServiceLocation,
    ServiceTime,
)
from parsing_errors import InvalidTagName, MissingField, UnsupportedServiceType
from traversable import ElementNode, Traversable, find_first

logger = logging.getLogger(__name__)

RESULT_TAG = 'GetServiceDetailsResult'
LOCATION_TAG = 'location'
ASSOCIATION_TAG = 'association'
SUPPORTED_SERVICE_TYPE = 'train'

# upper bounds of the feed's unsigned platform and length types
MAX_PLATFORM = 255
MAX_LENGTH = 65535


def parse_service_details(document: Union[str, bytes]) -> ServiceDetails:
    """
    Parse a service details response document.

    Args:
        document: XML text containing one GetServiceDetailsResult element

    Returns:
        ServiceDetails for the service

    Raises:
        MalformedDocument: If the text is not well-formed XML
        MissingField: If the result element or a mandatory field is absent
        ParsingError: For any other invalid content (see parsing_errors)
    """
    root = ElementNode.from_string(document)
    return build_service_details(find_first(root, RESULT_TAG))


def expect_tag(node: Traversable, expected: str) -> None:
    found = node.tag_name()
    if found != expected:
        raise InvalidTagName(expected=expected, found=found)


def build_service_details(node: Traversable) -> ServiceDetails:
    """Build ServiceDetails from a GetServiceDetailsResult node."""
    expect_tag(node, RESULT_TAG)

    service_type = require_text(node, 'serviceType')
    if service_type != SUPPORTED_SERVICE_TYPE:
        raise UnsupportedServiceType(service_type)

    generated_at = require_timestamp(node, 'generatedAt')
    rid = require_text(node, 'rid')
    uid = require_text(node, 'uid')
    rsid = optional(require_text, node, 'rsid')
    trainid = require_text(node, 'trainid')
    sdd = require_date(node, 'sdd')
    is_passenger_service = optional_bool(node, 'isPassengerService', True)
    is_charter = optional_bool(node, 'isCharter', False)
    category = require_text(node, 'category')
    operator = require_text(node, 'operator')
    operator_code = require_text(node, 'operatorCode')
    cancel_reason = optional(require_text, node, 'cancelReason')
    delay_reason = optional(require_text, node, 'delayReason')
    is_reverse_formation = optional_bool(node, 'isReverseFormation', False)

    locations = tuple(
        build_service_location(location)
        for location in node.child('locations').children()
    )

    logger.debug(f"Parsed service {rid} ({trainid}) with {len(locations)} location(s)")

    return ServiceDetails(
        generated_at=generated_at,
        service_type=service_type,
        rid=rid,
        uid=uid,
        rsid=rsid,
        trainid=trainid,
        sdd=sdd,
        is_passenger_service=is_passenger_service,
        is_charter=is_charter,
        category=category,
        operator=operator,
        operator_code=operator_code,
        cancel_reason=cancel_reason,
        delay_reason=delay_reason,
        is_reverse_formation=is_reverse_formation,
        locations=locations,
    )


def build_service_location(node: Traversable) -> ServiceLocation:
    """Build one ServiceLocation from a `location` node."""
    expect_tag(node, LOCATION_TAG)

    location = Location(
        name=require_text(node, 'locationName'),
        crs=optional(require_text, node, 'crs'),
        tiploc=optional(require_text, node, 'tiploc'),
    )

    associations = None
    try:
        container = node.child('associations')
    except MissingField:
        pass
    else:
        associations = tuple(build_association(child) for child in container.children())

    activities_text = optional(require_text, node, 'activities')
    activities = decode_activities(activities_text) if activities_text is not None else None

    time = ServiceTime(
        arrival=resolve_time_record(node, 'arrival'),
        departure=resolve_time_record(node, 'departure'),
    )

    # zero means unknown
    length = optional(require_unsigned, node, 'length', MAX_LENGTH)
    if length == 0:
        length = None

    false_destination = None
    false_destination_name = optional(require_text, node, 'falseDest')
    if false_destination_name is not None:
        false_destination = Location(
            name=false_destination_name,
            tiploc=optional(require_text, node, 'fdTiploc'),
        )

    return ServiceLocation(
        location=location,
        associations=associations,
        adhoc_alerts=_adhoc_alerts(node),
        activities=activities,
        length=length,
        detach_front=optional_bool(node, 'detachFront', False),
        is_operational=optional_bool(node, 'isOperational', False),
        is_pass=optional_bool(node, 'isPass', False),
        is_cancelled=optional_bool(node, 'isCancelled', False),
        false_destination=false_destination,
        platform=optional(require_unsigned, node, 'platform', MAX_PLATFORM),
        platform_is_hidden=optional_bool(node, 'platformIsHidden', False),
        # the feed spells it this way
        is_suppressed=optional_bool(node, 'serviceIsSupressed', False),
        time=time,
        raw_lateness=optional(require_text, node, 'lateness'),
    )


def _adhoc_alerts(node: Traversable) -> Optional[Tuple[str, ...]]:
    try:
        container = node.child('adhocAlerts')
    except MissingField:
        return None
    return tuple(alert.text() for alert in container.children())


def build_association(node: Traversable) -> Association:
    """Build one Association from an `association` node."""
    expect_tag(node, ASSOCIATION_TAG)

    return Association(
        category=parse_association_category(require_text(node, 'category')),
        rid=require_text(node, 'rid'),
        uid=require_text(node, 'uid'),
        trainid=require_text(node, 'trainid'),
        rsid=optional(require_text, node, 'rsid'),
        sdd=require_date(node, 'sdd'),
        origin=_association_end(node, 'origin', 'originCRS', 'originTiploc'),
        destination=_association_end(node, 'destination', 'destCRS', 'destTiploc'),
        is_cancelled=optional_bool(node, 'cancelled', False),
    )


def _association_end(node: Traversable, name_tag: str, crs_tag: str, tiploc_tag: str) -> Optional[Location]:
    name = optional(require_text, node, name_tag)
    if name is None:
        return None
    return Location(
        name=name,
        crs=optional(require_text, node, crs_tag),
        tiploc=optional(require_text, node, tiploc_tag),
    )
