import typer
from rich.console import Console
from pathlib import Path

from kruskal_trace.engine import MSTEngine
from kruskal_trace.generate import RandomGraphConfig, make_random_graph
from kruskal_trace.io import format_graph_text, load_graph, save_graph_json
from kruskal_trace.models import GraphDocument
from kruskal_trace.reports.json_report import MSTJSONReporter, TraceJSONReporter
from kruskal_trace.reports.terminal_report import print_mst_summary, print_trace_table


app = typer.Typer(add_completion=False)
console = Console()


def _load(graph_file: str) -> GraphDocument:
    path = Path(graph_file)
    if not path.exists():
        raise typer.BadParameter(f"Graph file not found: {path}")
    try:
        return load_graph(str(path))
    except (KeyError, ValueError) as e:
        raise typer.BadParameter(f"Could not read {path}: {e}")


def _engine(doc: GraphDocument) -> MSTEngine:
    try:
        return MSTEngine.from_document(doc)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command()
def mst(
    graph_file: str = typer.Argument(..., help="Graph file (.json graph, .csv edge list, or 'V E' text format)"),
    out_json: str = typer.Option(None, "--out-json", help="Output JSON path for the accepted edges and total cost"),
):
    """Compute the minimum spanning tree (or forest) with Kruskal's algorithm."""
    doc = _load(graph_file)
    engine = _engine(doc)
    edges, cost = engine.compute_mst()

    print_mst_summary(edges, cost, vertex_count=engine.vertex_count, console=console)

    if out_json:
        MSTJSONReporter().generate(edges, cost, out_json)
        console.print(f"[green]✓[/green] JSON report saved to: {out_json}")


@app.command()
def trace(
    graph_file: str = typer.Argument(..., help="Graph file (.json graph, .csv edge list, or 'V E' text format)"),
    out_json: str = typer.Option(None, "--out-json", help="Output path for the step trace JSON document"),
    quiet: bool = typer.Option(False, "--quiet", help="Skip the step table"),
):
    """Run Kruskal's algorithm and record every accept/reject decision."""
    doc = _load(graph_file)
    result = _engine(doc).compute_mst_trace()

    if not quiet:
        print_trace_table(result, console=console)

    if out_json:
        TraceJSONReporter().generate(result, out_json)
        console.print(f"[green]✓[/green] Trace saved to: {out_json} ({len(result.steps)} step(s))")


@app.command("random")
def random_graph(
    n: int = typer.Option(8, "--n", help="Number of vertices (clamped to 2..30)"),
    density: float = typer.Option(0.25, "--density", help="Edge probability for each remaining vertex pair (0..1)"),
    w_min: int = typer.Option(1, "--w-min", help="Minimum edge weight"),
    w_max: int = typer.Option(20, "--w-max", help="Maximum edge weight"),
    connected: bool = typer.Option(True, "--connected/--no-connected", help="Start from a random spanning tree"),
    seed: int = typer.Option(0, "--seed", help="Random seed for reproducible graphs"),
    out: str = typer.Option("graph.json", "--out", help="Output path; .txt writes the 'V E' text format, anything else graph JSON"),
):
    """Generate a random weighted graph."""
    cfg = RandomGraphConfig(n=n, density=density, w_min=w_min, w_max=w_max, connected=connected)
    doc = make_random_graph(cfg, seed=seed)

    if out.lower().endswith(".txt"):
        Path(out).write_text(format_graph_text(doc), encoding="utf-8")
    else:
        save_graph_json(doc, out)

    console.print(f"[green]✓[/green] Generated graph: {len(doc.nodes)} vertices, {len(doc.edges)} edges -> {out}")


@app.command()
def plot(
    graph_file: str = typer.Argument(..., help="Graph file (.json graph, .csv edge list, or 'V E' text format)"),
    step: int = typer.Option(-1, "--step", help="Trace frame: -1 bare graph, 0..N-1 after that step, N final frame"),
    out_png: str = typer.Option("kruskal_step.png", "--out-png", help="Output PNG path"),
):
    """Render one frame of the Kruskal trace as a PNG."""
    from kruskal_trace.viz import plot_trace_step

    doc = _load(graph_file)
    result = _engine(doc).compute_mst_trace()
    if not -1 <= step <= len(result.steps):
        raise typer.BadParameter(f"--step must be in [-1, {len(result.steps)}]")

    plot_trace_step(doc, result, step, out_png)
    console.print(f"[green]✓[/green] Frame PNG: {out_png}")


if __name__ == "__main__":
    app()
