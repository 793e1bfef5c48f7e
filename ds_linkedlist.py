from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Optional

logger = logging.getLogger(__name__)


# Singly linked list: a list is its head node, the empty list is None
class ListNode:
    def __init__(self, val: Any, next: Optional[ListNode] = None):
        self.val = val
        self.next = next

    def append(self, val: Any) -> ListNode:
        tail = self
        while tail.next:
            tail = tail.next

        tail.next = ListNode(val)
        return tail.next

    def __iter__(self) -> Iterator[ListNode]:
        curr_node = self
        while curr_node:
            yield curr_node
            curr_node = curr_node.next

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def to_values(head: Optional[ListNode]) -> List[Any]:
    if head is None:
        return []
    return [node.val for node in head]


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """
    Build a list from an ordered iterable: first value becomes the head,
    every later value is appended to the tail.
    """
    head = None
    size = 0
    for val in values:
        if head is None:
            head = ListNode(val)
        else:
            head.append(val)
        size += 1

    logger.debug("built list of %d nodes", size)
    return head


def build_sequential(count: int) -> Optional[ListNode]:
    # 0 .. count-1, the fixture used by the demo and the tests
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return build_list(range(count))
