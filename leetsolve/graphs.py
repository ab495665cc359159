"""Graph problems: cloning, course ordering, bipartiteness and the town judge."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


@dataclass(eq=False, repr=False)
class GraphNode:
    """An undirected graph node; nodes compare and hash by identity."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"GraphNode(val={self.val!r}, neighbors={[n.val for n in self.neighbors]!r})"


class _Mark(Enum):
    IN_PROGRESS = auto()
    DONE = auto()


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Deep copy of the graph reachable from ``node``, cycles included."""
    if node is None:
        return None
    clones: dict[GraphNode, GraphNode] = {}

    def copy(original: GraphNode) -> GraphNode:
        if original in clones:
            return clones[original]
        clone = GraphNode(original.val)
        clones[original] = clone
        clone.neighbors = [copy(neighbor) for neighbor in original.neighbors]
        return clone

    return copy(node)


def _following_courses(prerequisites: Iterable[Sequence[int]]) -> dict[int, list[int]]:
    """Map each course to the courses that require it, in input order."""
    following: dict[int, list[int]] = defaultdict(list)
    for course, required in prerequisites:
        following[required].append(course)
    return following


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Whether all courses can be taken; ``[a, b]`` means ``b`` comes before ``a``."""
    following = _following_courses(prerequisites)
    marks: dict[int, _Mark] = {}

    def acyclic_from(course: int) -> bool:
        marks[course] = _Mark.IN_PROGRESS
        for nxt in following.get(course, ()):
            state = marks.get(nxt)
            if state is _Mark.IN_PROGRESS:
                return False
            if state is None and not acyclic_from(nxt):
                return False
        marks[course] = _Mark.DONE
        return True

    return all(
        acyclic_from(course) for course in range(num_courses) if course not in marks
    )


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """A valid order to take the courses in, or an empty list if there is a cycle.

    Courses are explored from the lowest number up, and the followers of a
    course in ascending order, so the result is deterministic.
    """
    following: dict[int, set[int]] = defaultdict(set)
    for course, required in prerequisites:
        following[required].add(course)
    marks: dict[int, _Mark] = {}
    order: list[int] = []

    def visit(course: int) -> bool:
        state = marks.get(course)
        if state is _Mark.DONE:
            return True
        if state is _Mark.IN_PROGRESS:
            return False
        marks[course] = _Mark.IN_PROGRESS
        for nxt in sorted(c for c in following.get(course, ()) if c < num_courses):
            if not visit(nxt):
                return False
        marks[course] = _Mark.DONE
        order.append(course)
        return True

    for course in range(num_courses):
        if course not in marks and not visit(course):
            return []
    order.reverse()
    return order


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Whether the adjacency-list graph can be split into two independent sets."""
    sides: dict[int, bool] = {}
    for start in range(len(graph)):
        if start in sides:
            continue
        sides[start] = True
        stack = [start]
        while stack:
            vertex = stack.pop()
            for adjacent in graph[vertex]:
                if adjacent not in sides:
                    sides[adjacent] = not sides[vertex]
                    stack.append(adjacent)
    return all(
        sides[vertex] != sides[adjacent]
        for vertex, adjacents in enumerate(graph)
        for adjacent in adjacents
    )


def find_judge(n: int, trust: Iterable[Sequence[int]]) -> int:
    """The person (1..n) trusted by everyone else who trusts nobody, or -1."""
    trusts_someone: set[int] = set()
    trusted_by: dict[int, set[int]] = defaultdict(set)
    for truster, trusted in trust:
        trusts_someone.add(truster)
        trusted_by[trusted].add(truster)
    for person in range(1, n + 1):
        if person in trusts_someone:
            continue
        supporters = {p for p in trusted_by.get(person, ()) if 1 <= p <= n}
        if len(supporters) == n - 1:
            return person
    return -1