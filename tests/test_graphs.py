import pytest

from leetsolve.graphs import (
    GraphNode,
    can_finish,
    clone_graph,
    find_judge,
    find_order,
    is_bipartite,
)


def _two_node_graph():
    first = GraphNode(1)
    second = GraphNode(2)
    first.neighbors = [second]
    second.neighbors = [first]
    return first, second


def test_clone_graph_empty():
    assert clone_graph(None) is None


def test_clone_graph_copies_structure():
    first, _ = _two_node_graph()
    cloned = clone_graph(first)
    assert cloned is not first
    assert cloned.val == 1
    assert [n.val for n in cloned.neighbors] == [2]
    assert cloned.neighbors[0] is not first.neighbors[0]
    assert cloned.neighbors[0].neighbors[0] is cloned


def test_clone_graph_is_deep():
    first, second = _two_node_graph()
    cloned = clone_graph(first)
    second.val = 999
    assert cloned.neighbors[0].val == 2


def test_clone_graph_shared_neighbor_cloned_once():
    a, b, c = GraphNode(1), GraphNode(2), GraphNode(3)
    a.neighbors = [b, c]
    b.neighbors = [a, c]
    c.neighbors = [a, b]
    cloned = clone_graph(a)
    clone_b, clone_c = cloned.neighbors
    assert clone_b.neighbors[1] is clone_c
    assert clone_c.neighbors[0] is cloned


@pytest.mark.parametrize(
    "num_courses, prerequisites, expected",
    [
        (5, [[1, 4], [2, 4], [3, 1], [3, 2]], True),
        (2, [[1, 0]], True),
        (2, [[1, 0], [0, 1]], False),
        (20, [[0, 10], [3, 18], [5, 5], [6, 11], [11, 14], [13, 1], [15, 1], [17, 4]], False),
    ],
)
def test_can_finish(num_courses, prerequisites, expected):
    assert can_finish(num_courses, prerequisites) is expected


@pytest.mark.parametrize(
    "num_courses, prerequisites, expected",
    [
        (4, [[1, 0], [2, 0], [3, 1], [3, 2]], [0, 2, 1, 3]),
        (2, [[1, 0]], [0, 1]),
        (2, [[1, 0], [0, 1]], []),
        (1, [], [0]),
    ],
)
def test_find_order(num_courses, prerequisites, expected):
    assert find_order(num_courses, prerequisites) == expected


def test_find_order_respects_prerequisites():
    prerequisites = [[1, 0], [2, 1], [3, 0], [4, 3], [4, 2]]
    order = find_order(5, prerequisites)
    position = {course: i for i, course in enumerate(order)}
    assert sorted(order) == [0, 1, 2, 3, 4]
    assert all(position[required] < position[course] for course, required in prerequisites)


@pytest.mark.parametrize(
    "graph, expected",
    [
        ([[1, 2, 3], [0, 2], [0, 1, 3], [0, 2]], False),
        ([[1, 3], [0, 2], [1, 3], [0, 2]], True),
        ([[1], [0], [4], [4], [2, 3]], True),
    ],
)
def test_is_bipartite(graph, expected):
    assert is_bipartite(graph) is expected


@pytest.mark.parametrize(
    "n, trust, expected",
    [
        (2, [[1, 2]], 2),
        (3, [[1, 3], [2, 3]], 3),
        (3, [[1, 2], [2, 3], [3, 1]], -1),
        (3, [[1, 2], [2, 3]], -1),
        (4, [[1, 3], [1, 4], [2, 3], [2, 4], [4, 3]], 3),
    ],
)
def test_find_judge(n, trust, expected):
    assert find_judge(n, trust) == expected