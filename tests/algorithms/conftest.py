import pytest

from graphwalk.model.graph import Graph


@pytest.fixture
def triangle_tail():
    # Weights:
    #      [4]
    #   A───────B
    #    ╲     ╱
    #  [3]╲   ╱[2]
    #      ╲ ╱
    #       C
    #       │[5]
    #       D
    #
    # Edge order: A-B(4), B-C(2), A-C(3), C-D(5)
    return Graph.build(
        ["A", "B", "C", "D"],
        [("A", "B", 4), ("B", "C", 2), ("A", "C", 3), ("C", "D", 5)],
    )


@pytest.fixture
def triangle_tail_isolated():
    # Same as triangle_tail plus an isolated node E
    return Graph.build(
        ["A", "B", "C", "D", "E"],
        [("A", "B", 4), ("B", "C", 2), ("A", "C", 3), ("C", "D", 5)],
    )


@pytest.fixture
def two_components():
    # A─B─C    X─Y
    return Graph.build(
        ["A", "B", "C", "X", "Y"],
        [("A", "B", 1), ("B", "C", 1), ("X", "Y", 7)],
    )


@pytest.fixture
def binary_tree():
    #         R
    #       /   \
    #      L     M
    #     / \   / \
    #    LL LR ML MR
    return Graph.build(
        ["R", "L", "M", "LL", "LR", "ML", "MR"],
        [
            ("R", "L", 1),
            ("R", "M", 1),
            ("L", "LL", 1),
            ("L", "LR", 1),
            ("M", "ML", 1),
            ("M", "MR", 1),
        ],
    )


@pytest.fixture
def long_line():
    # N0─N1─...─N4999; deep enough to exhaust a recursive DFS
    n = 5000
    nodes = [f"N{i}" for i in range(n)]
    edges = [(nodes[i], nodes[i + 1], 1) for i in range(n - 1)]
    return Graph.build(nodes, edges)
