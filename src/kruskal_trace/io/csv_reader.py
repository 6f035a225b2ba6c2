from pathlib import Path
from typing import Dict, List

import pandas as pd

from kruskal_trace.models import Edge, GraphDocument, Node


class CSVReader:
    """Reads an edge list CSV (edge_id,src,dst,weight) into a GraphDocument."""

    required = {"edge_id", "src", "dst", "weight"}

    def __init__(self, filepath: str):
        self.filepath = Path(filepath)

    def read(self) -> GraphDocument:
        """Vertices are the endpoint names in order of first appearance."""
        if not self.filepath.exists():
            raise FileNotFoundError(f"CSV not found: {self.filepath}")

        df = pd.read_csv(self.filepath, dtype=str, encoding="utf-8-sig")
        df.columns = [str(c).strip().lower() for c in df.columns]
        missing = sorted(self.required - set(df.columns))
        if missing:
            raise ValueError(f"Missing columns: {missing}")
        # blank cells come back as NaN; Edge.from_dict expects None
        df = df.astype(object).where(pd.notna(df), None)

        edges: List[Edge] = []
        seen: Dict[str, None] = {}
        for idx, row in enumerate(df.to_dict(orient="records"), start=2):  # header is line 1
            try:
                edge = Edge.from_dict(row)
            except (KeyError, ValueError) as e:
                # Keep going; one bad row shouldn't drop the whole graph
                print(f"Warning: skipping invalid row at line {idx}: {e}")
                continue
            edges.append(edge)
            seen.setdefault(edge.src)
            seen.setdefault(edge.dst)

        nodes = [Node(node_id=name, label=name) for name in seen]
        return GraphDocument(nodes=nodes, edges=edges)


def load_edges_csv(path: str) -> GraphDocument:
    return CSVReader(path).read()
