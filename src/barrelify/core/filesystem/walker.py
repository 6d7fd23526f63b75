"""Post-order traversal over a directory tree model."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass


@dataclass(slots=True)
class _Frame[N, S]:
    node: N
    state: S | None = None
    expanded: bool = False


def walk_post_order[N, S](
    root: N,
    expand: Callable[[N], tuple[S, Iterable[N]]],
) -> Iterator[tuple[N, S]]:
    """Yield every node of a tree after all of its descendants.

    ``expand`` is called exactly once per node, when the node is first
    reached, and returns a state value for the node together with its
    children. The state is handed back alongside the node when it is
    yielded, so a directory listing taken on the way down can be reused on
    the way up. Siblings are visited in the order ``expand`` returns them.

    The walk uses an explicit stack, so tree depth is not bounded by the
    interpreter's recursion limit. Consumers may act on a yielded node (for
    example write a file) before the walk resumes; parents are expanded
    before their children but yielded only after them.

    Args:
        root: Root node
        expand: Callback returning ``(state, children)`` for a node

    Yields:
        ``(node, state)`` pairs in post-order
    """
    stack: list[_Frame[N, S]] = [_Frame(root)]

    while stack:
        frame = stack[-1]
        if frame.expanded:
            _ = stack.pop()
            yield frame.node, frame.state  # pyright: ignore[reportReturnType] # state is set once expanded
            continue

        frame.state, children = expand(frame.node)
        frame.expanded = True
        stack.extend(_Frame(child) for child in reversed(list(children)))
