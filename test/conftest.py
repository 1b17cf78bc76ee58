"""
Pytest configuration for all tests.
Sets up environment variables and fixtures used across test modules.
"""

import os
from typing import Iterator, List, Sequence, Union

import pytest

from parsing_errors import MissingField


# Set environment variable BEFORE any other imports
# This must happen at module import time to affect config initialization
os.environ['TESTING'] = 'true'


class FakeNode:
    """
    In-memory Traversable for exercising the parser without an XML engine.

    A node has a tag and either text or a list of children.
    """

    def __init__(self, tag: str, content: Union[str, Sequence['FakeNode']] = ''):
        self.tag = tag
        if isinstance(content, str):
            self._text = content
            self._children: List[FakeNode] = []
        else:
            self._text = ''
            self._children = list(content)

    def child(self, name: str) -> 'FakeNode':
        for node in self._children:
            if node.tag == name:
                return node
        raise MissingField(name)

    def children(self) -> Iterator['FakeNode']:
        return iter(self._children)

    def tag_name(self) -> str:
        return self.tag

    def text(self) -> str:
        return self._text


def fake(tag: str, content: Union[str, Sequence[FakeNode]] = '') -> FakeNode:
    return FakeNode(tag, content)


def fake_fields(tag: str, **fields: str) -> FakeNode:
    """Build a node whose children are simple text fields."""
    return FakeNode(tag, [FakeNode(name, text) for name, text in fields.items()])


@pytest.fixture
def make_node():
    """Factory for FakeNode trees."""
    return fake


@pytest.fixture
def make_fields():
    """Factory for FakeNodes made of text fields."""
    return fake_fields
