"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from loguru import logger

from zipcursor import Capability
from zipcursor.config import get_settings


@pytest.fixture
def fresh_settings():
    """Settings re-read from the environment within the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_messages():
    """Messages logged through loguru during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


# External collaborators: collections that hand out their own cursors


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value):
        self.value = value
        self.prev = self
        self.next = self


class NodeReference:
    def __init__(self, node):
        self._node = node

    @property
    def writable(self):
        return True

    def get(self):
        return self._node.value

    def set(self, value):
        self._node.value = value


class ListCursor:
    capability = Capability.BIDIRECTIONAL

    def __init__(self, node):
        self.node = node

    def get(self):
        return self.node.value

    def ref(self):
        return NodeReference(self.node)

    def advanced(self):
        return ListCursor(self.node.next)

    def retreated(self):
        return ListCursor(self.node.prev)

    def __eq__(self, other):
        if not isinstance(other, ListCursor):
            return NotImplemented
        return self.node is other.node

    def __hash__(self):
        return id(self.node)


class LinkedList:
    """Circular doubly linked list with a sentinel; bidirectional cursors."""

    def __init__(self, values=()):
        self._sentinel = _Node(None)
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value):
        node = _Node(value)
        tail = self._sentinel.prev
        node.prev, node.next = tail, self._sentinel
        tail.next = node
        self._sentinel.prev = node
        self._size += 1

    def begin(self):
        return ListCursor(self._sentinel.next)

    def end(self):
        return ListCursor(self._sentinel)

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __copy__(self):
        return LinkedList(self)


class _ForwardNode:
    __slots__ = ("value", "next")

    def __init__(self, value, next_node):
        self.value = value
        self.next = next_node


class ForwardCursor:
    capability = Capability.FORWARD

    def __init__(self, node):
        self.node = node

    def get(self):
        return self.node.value

    def ref(self):
        return NodeReference(self.node)

    def advanced(self):
        return ForwardCursor(self.node.next)

    def __eq__(self, other):
        if not isinstance(other, ForwardCursor):
            return NotImplemented
        return self.node is other.node

    def __hash__(self):
        return id(self.node)


class ForwardList:
    """Singly linked list without a size; forward-only cursors."""

    def __init__(self, values=()):
        head = None
        for value in reversed(list(values)):
            head = _ForwardNode(value, head)
        self._head = head

    def begin(self):
        return ForwardCursor(self._head)

    def end(self):
        return ForwardCursor(None)

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __copy__(self):
        return ForwardList(self)


@pytest.fixture
def linked_list_cls():
    return LinkedList


@pytest.fixture
def forward_list_cls():
    return ForwardList
