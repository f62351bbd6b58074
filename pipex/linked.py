"""A singly linked list of arbitrary values and the operations on it.

Functions that can change which node is first take the current head and
return the new one; an empty list is ``None``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One list element holding a value and a link to the next element."""

    content: Any
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents of this node and every node after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node.content
            node = node.next


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        following = node.next
        yield node
        node = following


def lst_new(content: Any) -> Node:
    """Return a new unlinked node holding content."""
    return Node(content)


def lst_add_front(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put node before head and return the new head.

    Adding no node leaves the list as it was.
    """
    if node is None:
        return head
    node.next = head
    return node


def lst_add_back(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Append node after the last element and return the head."""
    if head is None:
        return node
    lst_last(head).next = node
    return head


def lst_size(head: Optional[Node]) -> int:
    """Number of nodes from head to the end."""
    return sum(1 for _ in _nodes(head))


def lst_last(head: Optional[Node]) -> Optional[Node]:
    """The last node of the list, or None for an empty list."""
    last = None
    for last in _nodes(head):
        pass
    return last


def lst_delone(node: Optional[Node], delete: Optional[Callable[[Any], Any]]) -> None:
    """Release one node's content with delete; the node's link is left alone."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None


def lst_clear(
    head: Optional[Node], delete: Optional[Callable[[Any], Any]]
) -> Optional[Node]:
    """Release every node's content with delete and return the emptied list.

    Without a delete function nothing is released and head is returned.
    """
    if delete is None:
        return head
    for node in _nodes(head):
        lst_delone(node, delete)
        node.next = None
    return None


def lst_iter(head: Optional[Node], f: Optional[Callable[[Any], Any]]) -> None:
    """Call f on the content of every node, in order."""
    if head is None or f is None:
        return
    for content in head:
        f(content)


def lst_map(
    head: Optional[Node],
    f: Optional[Callable[[Any], Any]],
    delete: Optional[Callable[[Any], Any]],
) -> Optional[Node]:
    """Build a new list from f applied to every content of head.

    Returns None when the list, f or delete is missing. If f raises, the
    contents already produced are released with delete before the error
    propagates.
    """
    if head is None or f is None or delete is None:
        return None
    new_head: Optional[Node] = None
    tail: Optional[Node] = None
    try:
        for content in head:
            node = Node(f(content))
            if tail is None:
                new_head = node
            else:
                tail.next = node
            tail = node
    except BaseException:
        lst_clear(new_head, delete)
        raise
    return new_head