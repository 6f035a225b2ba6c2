from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple
import math

import numpy as np

from kruskal_trace.models import Edge, GraphDocument, Node


@dataclass(frozen=True)
class RandomGraphConfig:
    n: int = 8
    density: float = 0.25  # probability of an edge for each remaining vertex pair
    w_min: int = 1
    w_max: int = 20
    connected: bool = True


def _clamp(x, lo, hi):
    return max(lo, min(hi, x))


def circle_layout(
    n: int,
    center_x: float = 260.0,
    center_y: float = 220.0,
    radius: float = 180.0,
) -> List[Tuple[float, float]]:
    out: List[Tuple[float, float]] = []
    for i in range(n):
        ang = 2.0 * math.pi * i / n
        out.append((center_x + radius * math.cos(ang), center_y + radius * math.sin(ang)))
    return out


def make_random_graph(config: RandomGraphConfig, seed: Optional[int] = 0) -> GraphDocument:
    """
    Random undirected graph on nodes N1..Nn placed on a circle.

    With config.connected a random spanning tree is laid down first (node i
    links to a random earlier node), then every remaining pair gets an edge
    with probability config.density. No self loops, no duplicate pairs.
    """
    rng = np.random.default_rng(seed)

    n = int(_clamp(int(config.n), 2, 30))
    density = float(_clamp(float(config.density), 0.0, 1.0))
    w_lo = int(min(config.w_min, config.w_max))
    w_hi = int(max(config.w_min, config.w_max))

    positions = circle_layout(n)
    nodes = [
        Node(node_id=f"N{i + 1}", label=f"N{i + 1}", x=positions[i][0], y=positions[i][1])
        for i in range(n)
    ]

    edges: List[Edge] = []
    used: Set[Tuple[int, int]] = set()

    def add_edge(i: int, j: int) -> None:
        if i == j:
            return
        key = (min(i, j), max(i, j))
        if key in used:
            return
        used.add(key)
        w = int(rng.integers(w_lo, w_hi, endpoint=True))
        edges.append(Edge(
            edge_id=f"e{len(edges) + 1}",
            weight=w,
            src=nodes[i].node_id,
            dst=nodes[j].node_id,
        ))

    if config.connected:
        for i in range(1, n):
            add_edge(i, int(rng.integers(0, i)))

    for i in range(n):
        for j in range(i + 1, n):
            if (i, j) in used:
                continue
            if rng.random() < density:
                add_edge(i, j)

    return GraphDocument(nodes=nodes, edges=edges)
