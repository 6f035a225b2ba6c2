from __future__ import annotations

from typing import Any, Dict, List, Set, Tuple
import json
import math

from kruskal_trace.models import Edge, GraphDocument, Node, parse_weight


def _grid_position(idx: int) -> Tuple[int, int]:
    return 80 + (idx % 8) * 80, 80 + (idx // 8) * 80


def _as_coord(raw: Any, default: float) -> float:
    try:
        v = float(raw)
    except (TypeError, ValueError):
        return float(default)
    return v if math.isfinite(v) else float(default)


def _require_utf8(value: str, what: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(f"{what} is not valid UTF-8 text: {value!r}") from e
    return value


def parse_graph_json(raw: str) -> GraphDocument:
    """
    Graph JSON schema:

    {
      "nodes": [{"id": "A", "label": "A", "x": 80, "y": 120}],
      "edges": [{"id": "e1", "source": "A", "target": "B", "w": 2}]
    }

    label, x and y are optional. Node and edge ids must be unique, every edge
    must reference known nodes and w must be an integer.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError("Invalid JSON (could not parse).") from e

    if not isinstance(data, dict) or not isinstance(data.get("nodes"), list) or not isinstance(data.get("edges"), list):
        raise ValueError('JSON must have shape: { "nodes": [...], "edges": [...] }')

    node_ids: Set[str] = set()
    nodes: List[Node] = []
    for idx, n in enumerate(data["nodes"]):
        node_id = n.get("id") if isinstance(n, dict) else None
        if not node_id or not isinstance(node_id, str):
            raise ValueError(f"Node at index {idx} missing string id.")
        _require_utf8(node_id, f"Node id at index {idx}")
        if node_id in node_ids:
            raise ValueError(f"Duplicate node id: {node_id}")
        node_ids.add(node_id)

        gx, gy = _grid_position(idx)
        label = n.get("label")
        if isinstance(label, str):
            _require_utf8(label, f"Label of node {node_id}")
        nodes.append(Node(
            node_id=node_id,
            label=label if isinstance(label, str) else node_id,
            x=_as_coord(n.get("x"), gx),
            y=_as_coord(n.get("y"), gy),
        ))

    edge_ids: Set[str] = set()
    edges: List[Edge] = []
    for idx, e in enumerate(data["edges"]):
        edge_id = e.get("id") if isinstance(e, dict) else None
        if not edge_id or not isinstance(edge_id, str):
            raise ValueError(f"Edge at index {idx} missing string id.")
        _require_utf8(edge_id, f"Edge id at index {idx}")
        if edge_id in edge_ids:
            raise ValueError(f"Duplicate edge id: {edge_id}")
        edge_ids.add(edge_id)

        src, dst = e.get("source"), e.get("target")
        if not src or not isinstance(src, str):
            raise ValueError(f"Edge {edge_id} missing source.")
        if not dst or not isinstance(dst, str):
            raise ValueError(f"Edge {edge_id} missing target.")
        if src not in node_ids or dst not in node_ids:
            raise ValueError(f"Edge {edge_id} refers to unknown node(s): {src}, {dst}")

        try:
            weight = parse_weight(e.get("w"))
        except (KeyError, ValueError) as err:
            raise ValueError(f"Edge {edge_id} has invalid weight w.") from err

        edges.append(Edge(edge_id=edge_id, weight=weight, src=src, dst=dst))

    return GraphDocument(nodes=nodes, edges=edges)


def export_graph_json(doc: GraphDocument) -> Dict[str, Any]:
    nodes = []
    for idx, n in enumerate(doc.nodes):
        gx, gy = _grid_position(idx)
        nodes.append({
            "id": n.node_id,
            "label": n.label or n.node_id,
            "x": n.x if n.x is not None else gx,
            "y": n.y if n.y is not None else gy,
        })
    edges = [
        {"id": e.edge_id, "source": e.src, "target": e.dst, "w": e.weight}
        for e in doc.edges
    ]
    return {"nodes": nodes, "edges": edges}


def load_graph_json(path: str) -> GraphDocument:
    with open(path, "r", encoding="utf-8") as f:
        return parse_graph_json(f.read())


def save_graph_json(doc: GraphDocument, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(export_graph_json(doc), f, indent=2)
