from .disjoint_set import DisjointSet
from .sorting import stable_sort_by_weight

__all__ = ["DisjointSet", "stable_sort_by_weight"]
