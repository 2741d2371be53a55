# src/wgraph/cli.py
import argparse
import logging
import math
from typing import Dict, List, Optional, Tuple

from wgraph import config
from wgraph.graph.algorithms import shortest_path
from wgraph.graph.model import Vertex, WeightedGraph

logger = logging.getLogger(__name__)


def parse_edge(token: str) -> Tuple[str, str, float]:
    """'A-B:2.5' -> ('A', 'B', 2.5). Sin ':peso' usa DEFAULT_EDGE_WEIGHT."""
    pair, sep, raw_weight = token.rpartition(config.WEIGHT_SEPARATOR)
    if not sep:
        pair, raw_weight = token, ""
    parts = pair.split(config.EDGE_TOKEN_SEPARATOR)
    # los nombres de vértice no pueden contener el separador
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"arista inválida '{token}', formato esperado A{config.EDGE_TOKEN_SEPARATOR}B{config.WEIGHT_SEPARATOR}peso")
    weight = float(raw_weight) if raw_weight else config.DEFAULT_EDGE_WEIGHT
    if not math.isfinite(weight):
        raise ValueError(f"peso no finito en '{token}'")
    a, b = parts
    return a, b, weight


def build_graph(edge_tokens: List[str], extra_vertices: Optional[List[str]] = None) -> Tuple[WeightedGraph, Dict[str, Vertex]]:
    graph, by_name = WeightedGraph.from_edges(parse_edge(t) for t in edge_tokens)
    for name in extra_vertices or []:
        if name not in by_name:
            by_name[name] = graph.add_vertex(Vertex(name))
    logger.info("graph built: %d vertices", len(graph))
    return graph, by_name


def _lookup(parser: argparse.ArgumentParser, by_name: Dict[str, Vertex], name: str) -> Vertex:
    if name not in by_name:
        parser.error(f"vértice desconocido: {name}")
    return by_name[name]


def cmd_show(args, graph, by_name, parser):
    print(graph.to_text())


def cmd_bfs(args, graph, by_name, parser):
    start = _lookup(parser, by_name, args.start)
    print(" ".join(str(p) for p in graph.bfs(start)))


def cmd_dijkstra(args, graph, by_name, parser):
    start = _lookup(parser, by_name, args.start)
    dist = graph.dijkstra(start)
    for v in graph.vertices:
        print(f"{v.get_data()}: {dist[v]}")


def cmd_path(args, graph, by_name, parser):
    src = _lookup(parser, by_name, args.src)
    dst = _lookup(parser, by_name, args.dst)
    path, cost = shortest_path(graph, src, dst)
    print("Path:", " ".join(str(v.get_data()) for v in path) if path else None)
    print("Cost:", cost)


def make_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="wgraph")
    p.add_argument("--log-level", type=str.upper, default=config.LOG_LEVEL.upper(),
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Nivel de logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("edges", nargs="*", help="Aristas con formato A-B:peso (los nombres no pueden contener '-' ni ':')")
    common.add_argument("--vertex", action="append", default=[], help="Vértice aislado (se puede repetir)")

    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("show", parents=[common], help="Listar cada vértice con sus vecinos")
    ps.set_defaults(func=cmd_show)

    pb = sub.add_parser("bfs", parents=[common], help="Recorrido en anchura")
    pb.add_argument("--start", required=True, help="Vértice inicial")
    pb.set_defaults(func=cmd_bfs)

    pk = sub.add_parser("dijkstra", parents=[common], help="Distancias mínimas desde un vértice")
    pk.add_argument("--start", required=True, help="Vértice inicial")
    pk.set_defaults(func=cmd_dijkstra)

    pp = sub.add_parser("path", parents=[common], help="Camino mínimo entre dos vértices")
    pp.add_argument("--from", dest="src", required=True, help="Vértice origen")
    pp.add_argument("--to", dest="dst", required=True, help="Vértice destino")
    pp.set_defaults(func=cmd_path)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    p = make_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    try:
        graph, by_name = build_graph(args.edges, args.vertex)
    except ValueError as e:
        p.error(str(e))
    args.func(args, graph, by_name, p)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
