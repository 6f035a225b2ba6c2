import matplotlib.pyplot as plt

from kruskal_trace.generate import circle_layout


def _positions(doc):
    fallback = circle_layout(max(1, len(doc.nodes)))
    pos = {}
    for i, n in enumerate(doc.nodes):
        if n.x is not None and n.y is not None:
            pos[n.node_id] = (float(n.x), float(n.y))
        else:
            pos[n.node_id] = fallback[i]
    return pos


def edge_style(edge_id, current, post_final=False):
    """Line style for one edge in a frame; current is the TraceStep shown, or None."""
    if current is not None and edge_id == current.considered_edge_id:
        if post_final:
            return dict(color="#9CA3AF", linewidth=5.0, alpha=1.0, linestyle="-")
        color = "tab:green" if current.accepted else "tab:red"
        return dict(color=color, linewidth=5.0, alpha=1.0, linestyle="-")
    if current is not None and edge_id in current.mst_edge_ids:
        return dict(color="tab:blue", linewidth=4.0, alpha=1.0, linestyle="-")
    if current is not None and edge_id in current.rejected_edge_ids:
        return dict(color="black", linewidth=1.5, alpha=0.15, linestyle="--")
    return dict(color="black", linewidth=1.5, alpha=0.45, linestyle="-")


def plot_trace_step(
    doc,
    result,
    step_index,
    out_png,
    title=None,
):
    """
    Render one frame of a Kruskal trace.

    step_index -1 draws the bare graph, 0..len(steps)-1 draws the state after
    that decision, and len(steps) is the post-final frame where the last
    considered edge is drawn gray.
    """
    n_steps = len(result.steps)
    if not -1 <= step_index <= n_steps:
        raise IndexError(f"step_index {step_index} outside [-1, {n_steps}]")

    current = None
    if step_index >= 0 and n_steps:
        current = result.steps[min(step_index, n_steps - 1)]
    post_final = step_index == n_steps

    pos = _positions(doc)
    fig, ax = plt.subplots(figsize=(8, 6))

    for e in doc.edges:
        if e.src not in pos or e.dst not in pos:
            continue
        (x0, y0), (x1, y1) = pos[e.src], pos[e.dst]
        style = edge_style(e.edge_id, current, post_final)
        ax.plot([x0, x1], [y0, y1], zorder=1, **style)
        ax.annotate(
            str(e.weight),
            ((x0 + x1) / 2.0, (y0 + y1) / 2.0),
            fontsize=8,
            ha="center",
            va="center",
            bbox=dict(boxstyle="round,pad=0.15", fc="white", ec="none", alpha=0.8),
            zorder=2,
        )

    xs = [pos[n.node_id][0] for n in doc.nodes]
    ys = [pos[n.node_id][1] for n in doc.nodes]
    ax.scatter(xs, ys, s=320, c="white", edgecolors="black", linewidths=1.0, zorder=3)
    for n in doc.nodes:
        x, y = pos[n.node_id]
        ax.annotate(n.label or n.node_id, (x, y), ha="center", va="center", fontsize=9, zorder=4)

    if title is None:
        if current is None:
            title = "Graph"
        elif post_final:
            title = f"Final MST (weight {result.mst_weight})"
        else:
            title = (
                f"Step {step_index + 1}/{n_steps}: {current.action} "
                f"{current.considered_edge_id} (total {current.total_weight})"
            )
    ax.set_title(title)
    # screen coordinates: y grows downward
    ax.invert_yaxis()
    ax.set_aspect("equal", adjustable="datalim")
    ax.axis("off")

    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    plt.close(fig)
