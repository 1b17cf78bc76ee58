"""
Node traversal for service details documents.

The builder in service_parser only ever talks to the Traversable protocol, so
it never depends on a particular XML engine. ElementNode is the adapter for
xml.etree.ElementTree, which is what the rest of the code base parses with.
"""

import xml.etree.ElementTree as ET
from typing import Iterator, Protocol, Union

from parsing_errors import MalformedDocument, MissingField


class Traversable(Protocol):
    """A read-only view of one document node."""

    def child(self, name: str) -> "Traversable":
        """Return the first direct child tagged `name` or raise MissingField."""
        ...

    def children(self) -> Iterator["Traversable"]:
        """Iterate over direct children in document order."""
        ...

    def tag_name(self) -> str:
        ...

    def text(self) -> str:
        """Return the node's direct text, or an empty string if it has none."""
        ...


def local_name(tag: str) -> str:
    """Strip a Clark-notation namespace ("{uri}name" -> "name")."""
    if tag.startswith('{'):
        return tag.rsplit('}', 1)[1]
    return tag


class ElementNode:
    """Traversable adapter over an ElementTree element."""

    __slots__ = ('_element',)

    def __init__(self, element: ET.Element):
        self._element = element

    @classmethod
    def from_string(cls, document: Union[str, bytes]) -> 'ElementNode':
        """
        Parse an XML document and wrap its root element.

        Raises:
            MalformedDocument: If the text is not well-formed XML
        """
        try:
            root = ET.fromstring(document)
        except ET.ParseError as e:
            raise MalformedDocument(str(e)) from e
        return cls(root)

    def child(self, name: str) -> 'ElementNode':
        for element in self._element:
            if local_name(element.tag) == name:
                return ElementNode(element)
        raise MissingField(name)

    def children(self) -> Iterator['ElementNode']:
        return (ElementNode(element) for element in self._element)

    def tag_name(self) -> str:
        return local_name(self._element.tag)

    def text(self) -> str:
        return self._element.text or ''

    def __repr__(self) -> str:
        return f"ElementNode({self.tag_name()!r})"


def find_first(node: Traversable, name: str) -> Traversable:
    """
    Depth-first search for the first node tagged `name`, including `node` itself.

    Raises:
        MissingField: If no such node exists anywhere below `node`
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if current.tag_name() == name:
            return current
        stack.extend(reversed(list(current.children())))
    raise MissingField(name)
