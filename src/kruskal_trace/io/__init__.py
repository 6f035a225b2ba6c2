from pathlib import Path

from kruskal_trace.models import GraphDocument

from .csv_reader import CSVReader, load_edges_csv
from .graph_json import export_graph_json, load_graph_json, parse_graph_json, save_graph_json
from .text_format import format_graph_text, parse_graph_text, read_graph_text


def load_graph(path: str) -> GraphDocument:
    """Pick a reader by file suffix: .json graph JSON, .csv edge list, anything else the V E text format."""
    suffix = Path(path).suffix.lower()
    if suffix == ".json":
        return load_graph_json(path)
    if suffix == ".csv":
        return load_edges_csv(path)
    return read_graph_text(path)


__all__ = [
    "CSVReader",
    "export_graph_json",
    "format_graph_text",
    "load_edges_csv",
    "load_graph",
    "load_graph_json",
    "parse_graph_json",
    "parse_graph_text",
    "read_graph_text",
    "save_graph_json",
]
