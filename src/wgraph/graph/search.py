# src/wgraph/graph/search.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .algorithms import bfs, dijkstra
from .model import Vertex, WeightedGraph


class Search(ABC):
    """Punto de entrada único para un recorrido sobre un grafo."""

    def __init__(self, graph: WeightedGraph):
        self.graph = graph

    @abstractmethod
    def search(self, start: Vertex):
        ...


class BreadthFirstSearch(Search):
    def search(self, start: Vertex) -> List[Any]:
        return [v.get_data() for v in bfs(self.graph, start)]


class DijkstraSearch(Search):
    def search(self, start: Vertex) -> Dict[Vertex, float]:
        dist, _ = dijkstra(self.graph, start)
        return dist
