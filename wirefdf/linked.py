"""A minimal singly linked list of arbitrary contents."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

__all__ = [
    "ListNode",
    "lst_new",
    "lst_add_front",
    "lst_add_back",
    "lst_size",
    "lst_last",
    "lst_delone",
    "lst_clear",
    "lst_iter",
    "lst_map",
]


class ListNode:
    """One link of a singly linked list."""

    __slots__ = ("content", "next")

    def __init__(self, content: Any = None, next: Optional[ListNode] = None) -> None:
        self.content = content
        self.next = next

    def nodes(self) -> Iterator[ListNode]:
        """Yield this node and every node after it."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents of this node and every node after it."""
        for node in self.nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"ListNode({self.content!r})"


def lst_new(content: Any) -> ListNode:
    """Return a single detached node holding content."""
    return ListNode(content)


def lst_add_front(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Put node in front of head and return the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lst_add_back(head: Optional[ListNode], node: Optional[ListNode]) -> Optional[ListNode]:
    """Append node after the last node of head and return the head."""
    if node is None:
        return head
    if head is None:
        return node
    lst_last(head).next = node
    return head


def lst_size(head: Optional[ListNode]) -> int:
    """Return the number of nodes in the list."""
    if head is None:
        return 0
    return sum(1 for _ in head.nodes())


def lst_last(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the last node of the list, or None for an empty list."""
    last = None
    if head is not None:
        for last in head.nodes():
            pass
    return last


def lst_delone(node: ListNode, delete: Callable[[Any], Any]) -> None:
    """Release the content of one node through delete and detach the node."""
    delete(node.content)
    node.content = None
    node.next = None


def lst_clear(head: Optional[ListNode], delete: Callable[[Any], Any]) -> None:
    """Release every node of the list; the caller's head becomes None."""
    node = head
    while node is not None:
        following = node.next
        lst_delone(node, delete)
        node = following
    return None


def lst_iter(head: Optional[ListNode], f: Callable[[Any], Any]) -> None:
    """Call f on the content of every node, in order."""
    if head is None:
        return
    for content in head:
        f(content)


def lst_map(
    head: Optional[ListNode],
    f: Callable[[Any], Any],
    delete: Callable[[Any], Any],
) -> Optional[ListNode]:
    """Return a new list of f(content) for every node.

    If f fails part-way, the contents already produced are released through
    delete and the error propagates.
    """
    result: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    if head is None:
        return None
    for content in head:
        try:
            mapped = f(content)
        except Exception:
            lst_clear(result, delete)
            raise
        node = ListNode(mapped)
        if tail is None:
            result = node
        else:
            tail.next = node
        tail = node
    return result