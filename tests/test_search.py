# tests/test_search.py
import pytest

from wgraph.graph.model import InvalidVertexError, Vertex, WeightedGraph
from wgraph.graph.search import BreadthFirstSearch, DijkstraSearch, Search


def test_search_is_abstract():
    with pytest.raises(TypeError):
        Search(WeightedGraph())


def test_breadth_first_search():
    g, v = WeightedGraph.from_edges([("A", "B", 1), ("A", "C", 1), ("B", "D", 1)])
    assert BreadthFirstSearch(g).search(v["A"]) == ["A", "B", "C", "D"]


def test_dijkstra_search():
    g, v = WeightedGraph.from_edges([("A", "B", 1), ("B", "C", 2)])
    dist = DijkstraSearch(g).search(v["A"])
    assert dist[v["C"]] == 3


def test_search_unregistered_start():
    g = WeightedGraph()
    for s in (BreadthFirstSearch(g), DijkstraSearch(g)):
        with pytest.raises(InvalidVertexError):
            s.search(Vertex("X"))
