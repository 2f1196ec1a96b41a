"""Shared fixtures for the graph and decomposition tests."""
import os
import pytest

from intGraph import IntGraph

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data")


def build(n, edges):
    g = IntGraph(n)
    for v, u in edges:
        g.addEdge(v, u)
    return g


def edgeSets(components):
    """Components as a sorted list of sets of undirected edges."""
    return sorted([set(frozenset(e) for e in comp) for comp in components], key = lambda s: sorted(tuple(sorted(e)) for e in s))


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def triangle_tail():
    """Triangle 0-1-2 with the pendant path 1-3-4."""
    return build(5, [(0, 1), (1, 2), (2, 0), (1, 3), (3, 4)])


@pytest.fixture
def single_edge():
    return build(2, [(0, 1)])


@pytest.fixture
def two_triangles():
    """Triangles 0-1-2 and 3-4-5 joined by the bridge 2-3, plus leaf 6 on 5."""
    return build(7, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3), (5, 6)])


@pytest.fixture
def disconnected():
    """Path 0-1-2 and a separate edge 3-4."""
    return build(5, [(0, 1), (1, 2), (3, 4)])
