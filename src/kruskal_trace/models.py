from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import re

# plain decimal integer, optionally written as an integral float ("4.0")
_WEIGHT_RE = re.compile(r"([+-]?[0-9]+)(?:\.0*)?")


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between two named vertices."""

    edge_id: str
    weight: int
    src: str
    dst: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        """Create an Edge from a dict (e.g., CSV row).

        Expected keys (case-insensitive, whitespace-insensitive):
            edge_id, src, dst, weight
        """
        norm = {str(k).strip().lower(): v for k, v in data.items()}

        def req(key: str) -> str:
            if key not in norm or norm[key] is None:
                raise KeyError(f"Missing required field '{key}'")
            val = str(norm[key]).strip()
            if not val:
                raise ValueError(f"Empty required field '{key}'")
            return val

        return cls(
            edge_id=req("edge_id"),
            weight=parse_weight(norm.get("weight")),
            src=req("src"),
            dst=req("dst"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.edge_id,
            "weight": self.weight,
            "src": self.src,
            "dst": self.dst,
        }


def parse_weight(raw: Any) -> int:
    """Coerce a raw weight token to int; floats with a fractional part are rejected."""
    if raw is None:
        raise KeyError("Missing required field 'weight'")
    if isinstance(raw, bool):
        raise ValueError(f"Invalid integer weight: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(f"Invalid integer weight: {raw!r}")
        return int(raw)
    m = _WEIGHT_RE.fullmatch(str(raw).strip())
    if m is None:
        raise ValueError(f"Invalid integer weight: {raw!r}")
    return int(m.group(1))


@dataclass(frozen=True)
class Node:
    """Vertex of a graph document. Coordinates are only used for rendering."""

    node_id: str
    label: str = ""
    x: Optional[float] = None
    y: Optional[float] = None


@dataclass
class GraphDocument:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def vertex_names(self) -> List[str]:
        return [n.node_id for n in self.nodes]


@dataclass(frozen=True)
class TraceStep:
    """One Kruskal decision plus the cumulative state right after it."""

    considered_edge_id: str
    action: str  # "accept" | "reject"
    reason: str  # "ok" | "cycle"
    total_weight: int
    mst_edge_ids: List[str]
    rejected_edge_ids: List[str]

    @property
    def accepted(self) -> bool:
        return self.action == "accept"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "consideredEdgeId": self.considered_edge_id,
            "action": self.action,
            "reason": self.reason,
            "totalWeight": self.total_weight,
            "mstEdgeIds": list(self.mst_edge_ids),
            "rejectedEdgeIds": list(self.rejected_edge_ids),
        }


@dataclass(frozen=True)
class TraceResult:
    steps: List[TraceStep]
    mst_weight: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "steps": [s.to_dict() for s in self.steps],
            "mstWeight": self.mst_weight,
        }
