# src/wgraph/graph/model.py
import logging
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Tuple

from wgraph.config import DEFAULT_EDGE_WEIGHT

logger = logging.getLogger(__name__)


class InvalidVertexError(KeyError):
    """El vértice no está registrado en el grafo."""

    def __init__(self, vertex: "Vertex"):
        super().__init__(f"Vertex {vertex!r} is not in the graph")
        self.vertex = vertex


class Vertex:
    """
    Nodo con un payload opaco y un mapa de vecinos -> peso.
    - data: payload (solo se usa como etiqueta)
    - la identidad es la del objeto: dos vértices con el mismo payload son nodos distintos
    """
    def __init__(self, data: Hashable):
        self._data = data
        self._adjacent: Dict["Vertex", float] = {}

    @property
    def data(self):
        return self._data

    def get_data(self):
        return self._data

    def add_adjacent_vertex(self, other: "Vertex", weight: float):
        self._adjacent[other] = float(weight)

    def remove_adjacent_vertex(self, other: "Vertex"):
        self._adjacent.pop(other, None)

    def get_adjacent_vertices(self) -> Mapping["Vertex", float]:
        # vista de solo lectura; las aristas se modifican desde WeightedGraph
        return MappingProxyType(self._adjacent)

    def weight_to(self, other: "Vertex") -> float:
        return self._adjacent[other]

    @property
    def degree(self) -> int:
        return len(self._adjacent)

    def __repr__(self):
        return f"Vertex({self._data!r})"


class WeightedGraph:
    """
    Grafo no dirigido y ponderado.
    - vertices: registro de vértices en orden de inserción
    - las aristas viven únicamente en el mapa de pesos de cada Vertex;
      get_neighbors deriva su orden de ese mapa
    """
    def __init__(self):
        # dict como conjunto ordenado
        self._vertices: Dict[Vertex, None] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[Hashable, Hashable, float]]) -> Tuple["WeightedGraph", Dict[Any, Vertex]]:
        """
        Construye un grafo desde tripletas (payload_a, payload_b, peso).
        Crea un vértice por payload distinto. Retorna (grafo, payload -> Vertex).
        """
        graph = cls()
        by_payload: Dict[Any, Vertex] = {}
        for a, b, w in edges:
            for payload in (a, b):
                if payload not in by_payload:
                    by_payload[payload] = graph.add_vertex(Vertex(payload))
            graph.add_edge(by_payload[a], by_payload[b], w)
        return graph, by_payload

    def _validate(self, vertex: Vertex):
        if vertex not in self._vertices:
            raise InvalidVertexError(vertex)

    def add_vertex(self, vertex: Vertex) -> Vertex:
        if vertex in self._vertices:
            return vertex
        # sus vecinos previos (p. ej. de otro grafo) tienen que estar registrados aquí
        for neighbor in vertex.get_adjacent_vertices():
            if neighbor is not vertex and neighbor not in self._vertices:
                raise InvalidVertexError(neighbor)
        self._vertices[vertex] = None
        logger.debug("added vertex %r", vertex)
        return vertex

    def remove_vertex(self, vertex: Vertex):
        self._validate(vertex)
        for neighbor in list(vertex.get_adjacent_vertices()):
            neighbor.remove_adjacent_vertex(vertex)
            vertex.remove_adjacent_vertex(neighbor)
        del self._vertices[vertex]
        logger.debug("removed vertex %r", vertex)

    def add_edge(self, source: Vertex, destination: Vertex, weight: float = DEFAULT_EDGE_WEIGHT):
        """
        Añade la arista source<->destination con peso. Si ya existía,
        sobrescribe el peso en ambos lados sin duplicar vecinos.
        """
        self._validate(source)
        self._validate(destination)
        source.add_adjacent_vertex(destination, weight)
        destination.add_adjacent_vertex(source, weight)
        logger.debug("added edge %r <-> %r (w=%s)", source, destination, weight)

    def remove_edge(self, source: Vertex, destination: Vertex):
        self._validate(source)
        self._validate(destination)
        source.remove_adjacent_vertex(destination)
        destination.remove_adjacent_vertex(source)
        logger.debug("removed edge %r <-> %r", source, destination)

    def has_edge(self, source: Vertex, destination: Vertex) -> bool:
        self._validate(source)
        self._validate(destination)
        return destination in source.get_adjacent_vertices()

    def get_weight(self, source: Vertex, destination: Vertex) -> float:
        self._validate(source)
        self._validate(destination)
        return source.weight_to(destination)

    def get_neighbors(self, vertex: Vertex) -> List[Vertex]:
        self._validate(vertex)
        return list(vertex.get_adjacent_vertices())

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._vertices

    @property
    def vertices(self) -> List[Vertex]:
        return list(self._vertices)

    def edges(self) -> Iterator[Tuple[Vertex, Vertex, float]]:
        """Cada arista no dirigida una sola vez, como (a, b, peso)."""
        seen = set()
        for u in self._vertices:
            for v, w in u.get_adjacent_vertices().items():
                if v in seen:
                    continue
                yield u, v, w
            seen.add(u)

    def bfs(self, start: Vertex) -> List[Any]:
        from .algorithms import bfs
        return [v.get_data() for v in bfs(self, start)]

    def dijkstra(self, start: Vertex) -> Dict[Vertex, float]:
        from .algorithms import dijkstra
        dist, _ = dijkstra(self, start)
        return dist

    def to_text(self) -> str:
        lines = []
        for vertex in self._vertices:
            names = " ".join(str(n.get_data()) for n in vertex.get_adjacent_vertices())
            lines.append(f"Vertex {vertex.get_data()} is connected to: {names}".rstrip())
        return "\n".join(lines)

    def to_networkx(self):
        """
        Utility to create a networkx Graph from this structure.
        Nodes are the Vertex objects; the payload goes in the 'data' attribute.
        """
        import networkx as nx
        G = nx.Graph()
        for v in self._vertices:
            G.add_node(v, data=v.get_data())
        for u, v, w in self.edges():
            G.add_edge(u, v, weight=w)
        return G

    def __contains__(self, vertex) -> bool:
        return vertex in self._vertices

    def __len__(self):
        return len(self._vertices)
