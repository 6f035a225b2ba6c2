from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from kruskal_trace.models import Edge, GraphDocument, TraceResult, TraceStep
from kruskal_trace.topology import DisjointSet, stable_sort_by_weight


class MSTEngine:
    """Kruskal minimum spanning tree over named vertices.

    Vertices are registered with a dense index in [0, vertex_count). Edges are
    stored in input order; every computation sorts them again and runs on a
    fresh DisjointSet, so repeated calls return identical results.

    Edges that reference an unregistered vertex are skipped by both
    computations: they are never accepted, rejected or traced.
    """

    def __init__(self, vertex_count: int, edge_budget: int = 0):
        if vertex_count < 0:
            raise ValueError(f"Vertex count cannot be negative: {vertex_count}")
        self.vertex_count = int(vertex_count)
        # Capacity hint only; add_edge does not enforce it.
        self.edge_budget = int(edge_budget)
        self._vertices: Dict[str, int] = {}
        self._taken: Dict[int, str] = {}
        self._edges: List[Edge] = []

    @property
    def vertices(self) -> Dict[str, int]:
        return dict(self._vertices)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def add_vertex(self, name: str, index: int) -> None:
        if not 0 <= index < self.vertex_count:
            raise ValueError(f"Vertex index {index} for '{name}' outside [0, {self.vertex_count})")
        if name in self._vertices:
            raise ValueError(f"Vertex '{name}' already registered at index {self._vertices[name]}")
        if index in self._taken:
            raise ValueError(f"Vertex index {index} already used by '{self._taken[index]}'")
        self._vertices[name] = index
        self._taken[index] = name

    def index_of(self, name: str) -> Optional[int]:
        return self._vertices.get(name)

    def add_edge(self, edge_id: str, weight: int, src: str, dst: str) -> None:
        self._edges.append(Edge(edge_id=edge_id, weight=weight, src=src, dst=dst))

    @classmethod
    def from_document(cls, doc: GraphDocument) -> "MSTEngine":
        engine = cls(len(doc.nodes), len(doc.edges))
        for i, name in enumerate(doc.vertex_names()):
            engine.add_vertex(name, i)
        for e in doc.edges:
            engine.add_edge(e.edge_id, e.weight, e.src, e.dst)
        return engine

    def sorted_edges(self) -> List[Edge]:
        return stable_sort_by_weight(self._edges)

    def _decisions(self):
        """Yield (edge, accepted) for every edge with resolvable endpoints, in sorted order."""
        dsu = DisjointSet(self.vertex_count)
        for e in self.sorted_edges():
            a = self._vertices.get(e.src)
            b = self._vertices.get(e.dst)
            if a is None or b is None:
                continue
            yield e, dsu.union(a, b)

    def compute_mst(self) -> Tuple[List[Edge], int]:
        """Classic Kruskal. Returns (accepted edges in sorted order, total cost)."""
        mst: List[Edge] = []
        cost = 0
        for e, accepted in self._decisions():
            if accepted:
                mst.append(e)
                cost += e.weight
        return mst, cost

    def compute_mst_trace(self) -> TraceResult:
        """Kruskal with one TraceStep per processed edge.

        Each step carries the cumulative accepted/rejected id lists and the
        running MST weight after its own decision.
        """
        mst_ids: List[str] = []
        rejected_ids: List[str] = []
        total = 0
        steps: List[TraceStep] = []

        for e, accepted in self._decisions():
            if accepted:
                mst_ids.append(e.edge_id)
                total += e.weight
            else:
                rejected_ids.append(e.edge_id)
            steps.append(TraceStep(
                considered_edge_id=e.edge_id,
                action="accept" if accepted else "reject",
                reason="ok" if accepted else "cycle",
                total_weight=total,
                mst_edge_ids=list(mst_ids),
                rejected_edge_ids=list(rejected_ids),
            ))

        return TraceResult(steps=steps, mst_weight=total)
