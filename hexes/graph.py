"""Adjacency graphs over sets of hexes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable, Mapping, Sequence, TypeAlias

import networkx as nx

from .coords import Hex
from .neighbors import neighbors

logger = logging.getLogger(__name__)

CostFunction = Callable[[Hex], float]

if TYPE_CHECKING:  # pragma: no cover - typing only
    HexGraph: TypeAlias = nx.Graph[Hex]
else:  # pragma: no cover - runtime alias without subscripting
    HexGraph: TypeAlias = nx.Graph


def build_hex_graph(
    hexes: Iterable[Hex],
    *,
    cost: Mapping[Hex, float] | CostFunction | None = None,
    default_cost: float = 1.0,
) -> HexGraph:
    """Return an undirected graph linking every pair of adjacent hexes.

    Each edge weighs the mean cost of its two endpoints.
    """

    graph: HexGraph = nx.Graph()
    graph.add_nodes_from(hexes)
    cost_fn = _resolve_cost_function(cost, default_cost)

    for h in graph.nodes:
        for n in neighbors(h):
            if n in graph and not graph.has_edge(h, n):
                graph.add_edge(h, n, weight=(cost_fn(h) + cost_fn(n)) / 2.0)

    logger.debug(
        "built hex graph with %d nodes and %d edges",
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def shortest_hex_path(graph: HexGraph, start: Hex, goal: Hex) -> list[Hex]:
    """Return the lowest-cost path between ``start`` and ``goal`` using A* search."""

    if start == goal:
        if start not in graph:
            raise nx.NodeNotFound(f"{start!r} is not in the graph")
        return [start]

    step = _min_weight(graph)

    def heuristic(a: Hex, b: Hex) -> float:
        return float(a.distance(b)) * step

    return nx.astar_path(graph, start, goal, heuristic=heuristic, weight="weight")


def path_cost(graph: HexGraph, path: Sequence[Hex]) -> float:
    """Return the total edge weight along ``path``."""

    if len(path) < 2:
        return 0.0
    total = 0.0
    for origin, destination in zip(path, path[1:]):
        data = graph.get_edge_data(origin, destination) or {}
        total += float(data.get("weight", 0.0))
    return total


def _min_weight(graph: HexGraph) -> float:
    # Keeps the distance heuristic admissible when some edges cost less than 1.
    weights = [float(w) for _, _, w in graph.edges(data="weight", default=1.0)]
    return max(min(weights, default=1.0), 0.0)


def _resolve_cost_function(
    cost: Mapping[Hex, float] | CostFunction | None, default_cost: float
) -> CostFunction:
    if cost is None:
        return lambda _h: default_cost
    if callable(cost):
        return lambda h: float(cost(h))
    return lambda h: float(cost.get(h, default_cost))


__all__ = ["CostFunction", "HexGraph", "build_hex_graph", "path_cost", "shortest_hex_path"]
