# src/wgraph/graph/algorithms.py
"""
Algoritmos sobre WeightedGraph:
- BFS (recorrido en anchura)
- Dijkstra / shortest_path
"""
import heapq
import itertools
import logging
import math
from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple

from .model import InvalidVertexError, Vertex, WeightedGraph

logger = logging.getLogger(__name__)


# -------------------------
# BFS
# -------------------------
def bfs(graph: WeightedGraph, start: Vertex) -> Iterator[Vertex]:
    """
    Recorrido en anchura desde start. Devuelve un generador de vértices en
    orden de visita; cada llamada empieza con estado nuevo.
    Lanza InvalidVertexError de inmediato si start no está en el grafo.
    """
    if start not in graph:
        raise InvalidVertexError(start)
    return _bfs(graph, start)


def _bfs(graph: WeightedGraph, start: Vertex) -> Iterator[Vertex]:
    visited = {start}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        yield vertex
        for neighbor in graph.get_neighbors(vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)


# -------------------------
# DIJKSTRA + UTIL
# -------------------------
def dijkstra(graph: WeightedGraph, source: Vertex) -> Tuple[Dict[Vertex, float], Dict[Vertex, Optional[Vertex]]]:
    """
    Dijkstra clásico con heap y reinserción (sin decrease-key).
    Los pesos se leen del mapa de adyacencia de cada vértice; se asumen >= 0.
    retorna: (dist, prev) donde dist[v] = costo mínimo (inf si no alcanzable)
    y prev[v] = predecesor en el camino mínimo
    """
    if source not in graph:
        raise InvalidVertexError(source)

    dist: Dict[Vertex, float] = {v: math.inf for v in graph.vertices}
    prev: Dict[Vertex, Optional[Vertex]] = {v: None for v in graph.vertices}
    dist[source] = 0.0
    # el contador desempata: Vertex no es ordenable
    counter = itertools.count()
    pq: List[Tuple[float, int, Vertex]] = [(0.0, next(counter), source)]

    while pq:
        d, _, u = heapq.heappop(pq)
        if d > dist[u]:
            # entrada obsoleta, ya se encontró un camino más corto
            continue
        for v, w in u.get_adjacent_vertices().items():
            alt = d + w
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                heapq.heappush(pq, (alt, next(counter), v))

    logger.debug("dijkstra from %r: %d reachable of %d",
                 source, sum(1 for d in dist.values() if d < math.inf), len(dist))
    return dist, prev


def reconstruct_path(prev: Dict[Vertex, Optional[Vertex]], source: Vertex, target: Vertex) -> Optional[List[Vertex]]:
    """
    Sigue los predecesores de target hasta llegar a source (comparando por identidad).
    Retorna la lista de Vertex de source a target, [source] si son el mismo vértice,
    o None si la cadena de predecesores no llega a source.
    """
    if source is target:
        return [source]
    path: List[Vertex] = [target]
    while path[-1] is not source:
        parent = prev.get(path[-1])
        if parent is None:
            return None
        path.append(parent)
    return path[::-1]


def shortest_path(graph: WeightedGraph, source: Vertex, target: Vertex) -> Tuple[Optional[List[Vertex]], float]:
    """
    Camino de costo mínimo entre dos vértices registrados.
    Retorna (vértices del camino, costo); (None, inf) si target no es alcanzable.
    Lanza InvalidVertexError si source o target no están en el grafo.
    """
    if target not in graph:
        raise InvalidVertexError(target)
    dist, prev = dijkstra(graph, source)
    if dist[target] == math.inf:
        return None, math.inf
    return reconstruct_path(prev, source, target), dist[target]
