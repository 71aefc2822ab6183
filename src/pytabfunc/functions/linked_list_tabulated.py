import logging
from typing import Iterator, Optional

import numpy as np

from pytabfunc.core.point import Point
from pytabfunc.functions.abstract_tabulated import AbstractTabulatedFunction
from pytabfunc.validation.array_validator import check_finite_value, check_min_count

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ('x', 'y', 'prev', 'next')

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        self.prev: Optional["_Node"] = None
        self.next: Optional["_Node"] = None


class LinkedListTabulatedFunction(AbstractTabulatedFunction):
    """
    Tabulated function stored in a circular doubly linked list.

    ``head`` is the knot with the smallest x and ``head.prev`` the one with
    the largest. Index access walks from whichever end is nearer; floor
    search and insertion scan linearly.
    """

    def _initialize(self, x_values: np.ndarray, y_values: np.ndarray) -> None:
        self._head: Optional[_Node] = None
        self._count = 0
        for x, y in zip(x_values, y_values):
            self._add_node(float(x), float(y))
        logger.debug("Linked storage initialized: count=%d", self._count)

    def _add_node(self, x: float, y: float) -> None:
        """Append a node after the current tail."""
        node = _Node(x, y)
        if self._head is None:
            node.prev = node.next = node
            self._head = node
        else:
            self._link_before(self._head, node)
        self._count += 1

    @staticmethod
    def _link_before(anchor: _Node, node: _Node) -> None:
        node.prev = anchor.prev
        node.next = anchor
        anchor.prev.next = node
        anchor.prev = node

    def _get_node(self, index: int) -> _Node:
        self._check_index(index)
        if index <= self._count // 2:
            node = self._head
            for _ in range(index):
                node = node.next
        else:
            node = self._head.prev
            for _ in range(self._count - 1 - index):
                node = node.prev
        return node

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        for _ in range(self._count):
            yield node
            node = node.next

    def get_x(self, index: int) -> float:
        return self._get_node(index).x

    def get_y(self, index: int) -> float:
        return self._get_node(index).y

    def set_y(self, index: int, value: float) -> None:
        node = self._get_node(index)
        node.y = check_finite_value(value, "y")

    def index_of_x(self, x: float) -> int:
        for i, node in enumerate(self._nodes()):
            if node.x == x:
                return i
        return -1

    def index_of_y(self, y: float) -> int:
        for i, node in enumerate(self._nodes()):
            if node.y == y:
                return i
        return -1

    def left_bound(self) -> float:
        return self._head.x

    def right_bound(self) -> float:
        return self._head.prev.x

    def floor_index_of_x(self, x: float) -> int:
        self._check_query(x)
        if x < self._head.x:
            return 0
        if x >= self._head.prev.x:
            return self._count
        node = self._head
        for i in range(self._count - 1):
            if x < node.next.x:
                return i
            node = node.next
        return self._count

    def extrapolate_left(self, x: float) -> float:
        first = self._head
        return self._linear(x, first.x, first.next.x, first.y, first.next.y)

    def extrapolate_right(self, x: float) -> float:
        last = self._head.prev
        return self._linear(x, last.prev.x, last.x, last.prev.y, last.y)

    def interpolate_at(self, x: float, floor_index: int) -> float:
        left = self._get_node(floor_index)
        return self.interpolate(x, left.x, left.next.x, left.y, left.next.y)

    def insert(self, x: float, y: float) -> None:
        x, y = self._check_insertable(x, y)
        node = self._head
        for i in range(self._count):
            if node.x == x:
                logger.debug("insert(%r): existing knot %d, replacing y", x, i)
                node.y = y
                return
            if node.x > x:
                self._link_before(node, _Node(x, y))
                if i == 0:
                    self._head = node.prev
                self._count += 1
                logger.debug("insert(%r, %r): new knot at index %d, count=%d", x, y, i, self._count)
                return
            node = node.next
        self._add_node(x, y)
        logger.debug("insert(%r, %r): appended at index %d", x, y, self._count - 1)

    def remove(self, index: int) -> None:
        node = self._get_node(index)
        check_min_count(self._count - 1)
        node.prev.next = node.next
        node.next.prev = node.prev
        if node is self._head:
            self._head = node.next
        self._count -= 1
        logger.debug("remove(%d): count=%d", index, self._count)

    def __iter__(self) -> Iterator[Point]:
        for node in self._nodes():
            yield Point(node.x, node.y)
