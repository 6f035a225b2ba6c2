from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kruskal_trace.models import Edge, TraceResult


def print_trace_table(result: TraceResult, console: Optional[Console] = None) -> None:
    """
    Prints one row per Kruskal decision, in processing order.
    Accepted edges are green, cycle rejections red.
    """
    console = console or Console()

    table = Table(title="Kruskal Trace")
    table.add_column("#", justify="right")
    table.add_column("Edge", style="bold")
    table.add_column("Action")
    table.add_column("Reason")
    table.add_column("Total", justify="right")
    table.add_column("MST edges")
    table.add_column("Rejected")

    for k, s in enumerate(result.steps, start=1):
        color = "green" if s.accepted else "red"
        table.add_row(
            str(k),
            escape(s.considered_edge_id),
            f"[{color}]{s.action}[/{color}]",
            s.reason,
            str(s.total_weight),
            escape(", ".join(s.mst_edge_ids)),
            escape(", ".join(s.rejected_edge_ids)),
        )

    console.print(table)
    console.print(f"[bold]MST weight:[/bold] {result.mst_weight}")


def print_mst_summary(
    edges: List[Edge],
    total_cost: int,
    vertex_count: int,
    console: Optional[Console] = None,
) -> None:
    """Prints the accepted edges and whether they span every vertex."""
    console = console or Console()

    table = Table(title="Minimum Spanning Tree")
    table.add_column("Edge", style="bold")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Weight", justify="right")
    for e in edges:
        table.add_row(escape(e.edge_id), escape(e.src), escape(e.dst), str(e.weight))
    console.print(table)

    console.print(f"[bold]Total cost:[/bold] {total_cost}")
    # a forest with k edges over V vertices has V - k components
    components = vertex_count - len(edges)
    if components <= 1:
        console.print("[bold green]✅ Spanning tree covers every vertex[/bold green]")
    else:
        console.print(f"[bold yellow]⚠️ Spanning forest: {components} components[/bold yellow]")
