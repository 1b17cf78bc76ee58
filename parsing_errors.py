"""
Parsing errors for the LDBSV service details parser.

Every failure raised while turning a GetServiceDetails document into a
ServiceDetails model is one of the exceptions below. Each keeps the context
needed to diagnose the problem (field name, expected kind, text found) as
attributes so callers can render it however they like.
"""

from typing import Optional


class ParsingError(Exception):
    """Base class for all service details parsing failures."""


class InvalidTagName(ParsingError):
    """The node examined was not the tag the caller required."""

    def __init__(self, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(f"invalid tag name, expected {expected!r}, got {found!r}")


class MissingField(ParsingError):
    """A required child tag was absent."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"field {name!r} is missing")


class InvalidField(ParsingError):
    """A child was present but its text failed to convert to the required type."""

    def __init__(self, field: str, expected: str, found: Optional[str]):
        self.field = field
        self.expected = expected
        self.found = found
        super().__init__(
            f"field {field!r} couldn't be parsed, expected {expected}, got {found!r}"
        )


class InvalidActivity(ParsingError):
    """An activity chunk did not match the activity code table."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"invalid activity, got {code!r}")


class InvalidForecast(ParsingError):
    """A forecast type tag held a value outside the known forecast types."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid forecast type, got {text!r}")


class InvalidAssociationCategory(ParsingError):
    """An association category held a value outside the known categories."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid association category, got {text!r}")


class UnsupportedServiceType(ParsingError):
    """serviceType was well-formed but is not "train"."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"unsupported service type {text!r}")


class MalformedDocument(ParsingError):
    """The input was not well-formed XML."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"malformed XML document: {reason}")
