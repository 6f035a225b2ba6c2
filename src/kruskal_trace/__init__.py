from .engine import MSTEngine
from .models import Edge, GraphDocument, Node, TraceResult, TraceStep
from .topology import DisjointSet, stable_sort_by_weight

__all__ = [
    "DisjointSet",
    "Edge",
    "GraphDocument",
    "MSTEngine",
    "Node",
    "TraceResult",
    "TraceStep",
    "stable_sort_by_weight",
]
