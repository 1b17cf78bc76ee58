"""
Field extraction helpers.

Each helper looks up a named child of a node, takes its text and converts it,
raising MissingField when the child is absent and InvalidField when the text
does not convert. Optional fields go through `optional`, which is the only
place those two errors are turned into None.
"""

import re
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional, Type, TypeVar

from parsing_errors import InvalidField, MissingField
from traversable import Traversable

T = TypeVar('T')

# RFC 3339 date-time (section 5.6); ASCII digits only, matched with fullmatch
_TIMESTAMP_RE = re.compile(
    r'([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt]([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?'
    r'(?:([Zz])|([+-])([0-9]{2}):([0-9]{2}))'
)
_DATE_RE = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')
_UNSIGNED_RE = re.compile(r'[0-9]+')


def require_text(node: Traversable, name: str) -> str:
    """Return the text of child `name`. An empty element yields ''."""
    return node.child(name).text()


def require_scalar(node: Traversable, name: str, kind: Type[T]) -> T:
    """
    Return the text of child `name` converted with `kind`.

    Args:
        node: Parent node
        name: Child tag name
        kind: A callable type such as int or float

    Raises:
        MissingField: If the child is absent
        InvalidField: If `kind(text)` fails
    """
    text = require_text(node, name)
    try:
        return kind(text)
    except (TypeError, ValueError):
        raise InvalidField(field=name, expected=kind.__name__, found=text)


def require_unsigned(node: Traversable, name: str, maximum: int) -> int:
    """
    Return child `name` as an unsigned integer no larger than `maximum`.

    Only plain ASCII digits are accepted: no sign, separators or padding.

    Raises:
        MissingField: If the child is absent
        InvalidField: If the text is not digits or the value is out of range
    """
    text = require_text(node, name)
    if not _UNSIGNED_RE.fullmatch(text) or int(text) > maximum:
        raise InvalidField(field=name, expected=f'integer 0-{maximum}', found=text)
    return int(text)


def parse_timestamp(text: str) -> datetime:
    """
    Parse a strict RFC 3339 timestamp into an aware datetime.

    Fractions beyond microsecond precision are truncated.

    Raises:
        ValueError: If the text is not an RFC 3339 date-time
    """
    match = _TIMESTAMP_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not an RFC 3339 timestamp: {text!r}")

    year, month, day, hour, minute, second, fraction, zulu, sign, off_h, off_m = match.groups()
    microsecond = int(fraction[:6].ljust(6, '0')) if fraction else 0

    if zulu:
        tz = timezone.utc
    else:
        if int(off_h) > 23 or int(off_m) > 59:
            raise ValueError(f"offset out of range: {text!r}")
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        tz = timezone(-offset if sign == '-' else offset)

    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), int(second), microsecond,
        tzinfo=tz,
    )


def require_timestamp(node: Traversable, name: str) -> datetime:
    """Return child `name` parsed as an RFC 3339 timestamp."""
    text = require_text(node, name)
    try:
        return parse_timestamp(text)
    except ValueError:
        raise InvalidField(field=name, expected='timestamp', found=text)


def require_date(node: Traversable, name: str) -> date:
    """Return child `name` parsed as a YYYY-MM-DD calendar date."""
    text = require_text(node, name)
    if not _DATE_RE.fullmatch(text):
        raise InvalidField(field=name, expected='date', found=text)
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidField(field=name, expected='date', found=text)


def optional_bool(node: Traversable, name: str, default: bool) -> bool:
    """
    Return child `name` as a bool, or `default` when the child is absent.

    A present child must hold exactly "true" or "false".

    Raises:
        InvalidField: If the child is present with any other text
    """
    try:
        text = require_text(node, name)
    except MissingField:
        return default

    if text == 'true':
        return True
    if text == 'false':
        return False
    raise InvalidField(field=name, expected='bool', found=text)


def optional(extract: Callable[..., T], node: Traversable, name: str, *args) -> Optional[T]:
    """Run an extractor for a non-mandatory field, returning None if it is missing or invalid."""
    try:
        return extract(node, name, *args)
    except (MissingField, InvalidField):
        return None
