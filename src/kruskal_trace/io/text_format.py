from __future__ import annotations

from pathlib import Path
from typing import List

from kruskal_trace.models import Edge, GraphDocument, Node, parse_weight


def parse_graph_text(text: str) -> GraphDocument:
    """
    Whitespace-separated graph format:

        V E
        <V vertex names>          (index = position, 0-based)
        <E records: edgeId src dst weight>

    Tokens may be split across lines arbitrarily; only their order matters.
    """
    tokens = text.split()
    pos = 0

    def take(what: str) -> str:
        nonlocal pos
        if pos >= len(tokens):
            raise ValueError(f"Unexpected end of input while reading {what}")
        tok = tokens[pos]
        pos += 1
        return tok

    def take_count(what: str) -> int:
        tok = take(what)
        try:
            n = int(tok)
        except ValueError as e:
            raise ValueError(f"Invalid {what}: {tok!r}") from e
        if n < 0:
            raise ValueError(f"Invalid {what}: {tok!r}")
        return n

    v = take_count("vertex count")
    e = take_count("edge count")

    nodes: List[Node] = []
    for i in range(v):
        name = take(f"vertex name #{i}")
        nodes.append(Node(node_id=name, label=name))

    edges: List[Edge] = []
    for i in range(e):
        edge_id = take(f"edge #{i} id")
        src = take(f"edge {edge_id} source")
        dst = take(f"edge {edge_id} target")
        raw = take(f"edge {edge_id} weight")
        try:
            weight = parse_weight(raw)
        except ValueError as err:
            raise ValueError(f"Edge {edge_id}: {err}") from err
        edges.append(Edge(edge_id=edge_id, weight=weight, src=src, dst=dst))

    return GraphDocument(nodes=nodes, edges=edges)


def format_graph_text(doc: GraphDocument) -> str:
    lines = [f"{len(doc.nodes)} {len(doc.edges)}", " ".join(doc.vertex_names())]
    lines.extend(f"{e.edge_id} {e.src} {e.dst} {e.weight}" for e in doc.edges)
    return "\n".join(lines) + "\n"


def read_graph_text(path: str) -> GraphDocument:
    return parse_graph_text(Path(path).read_text(encoding="utf-8"))
