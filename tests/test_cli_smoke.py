import json
import os
import subprocess
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"


def _run(*args):
    env = dict(**os.environ)
    env["PYTHONPATH"] = str(SRC)
    env["PYTHONIOENCODING"] = "utf-8"
    env["MPLBACKEND"] = "Agg"

    cmd = [sys.executable, "-m", "kruskal_trace.cli", *args]
    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
    )


def test_cli_random_then_trace(tmp_path: Path):
    graph = tmp_path / "graph.json"
    r = _run("random", "--n", "6", "--density", "0.5", "--seed", "11", "--out", str(graph))
    assert r.returncode == 0, r.stderr + "\n" + r.stdout
    assert graph.exists()

    out_json = tmp_path / "trace.json"
    r = _run("trace", str(graph), "--out-json", str(out_json), "--quiet")
    assert r.returncode == 0, r.stderr + "\n" + r.stdout

    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert "steps" in data
    assert "mstWeight" in data
    assert len(data["steps"][-1]["mstEdgeIds"]) == 5


def test_cli_mst_text_format(tmp_path: Path):
    graph = tmp_path / "graph.txt"
    graph.write_text("3 3\nA B C\ne1 A B 1\ne2 B C 2\ne3 A C 3\n", encoding="utf-8")
    out_json = tmp_path / "mst.json"

    r = _run("mst", str(graph), "--out-json", str(out_json))
    assert r.returncode == 0, r.stderr + "\n" + r.stdout
    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["totalCost"] == 3
    assert [e["id"] for e in data["edges"]] == ["e1", "e2"]


def test_cli_plot(tmp_path: Path):
    graph = tmp_path / "graph.txt"
    graph.write_text("3 3\nA B C\ne1 A B 1\ne2 B C 2\ne3 A C 3\n", encoding="utf-8")
    out_png = tmp_path / "frame.png"
    r = _run("plot", str(graph), "--step", "2", "--out-png", str(out_png))
    assert r.returncode == 0, r.stderr + "\n" + r.stdout
    assert out_png.exists()


def test_cli_missing_file_is_usage_error(tmp_path: Path):
    r = _run("mst", str(tmp_path / "nope.txt"))
    assert r.returncode != 0


def test_cli_rejects_graph_json_with_lone_surrogate(tmp_path: Path):
    graph = tmp_path / "graph.json"
    graph.write_text(
        '{"nodes": [{"id": "A"}, {"id": "B"}],'
        ' "edges": [{"id": "\\ud800", "source": "A", "target": "B", "w": 1}]}',
        encoding="utf-8",
    )
    out_json = tmp_path / "trace.json"
    r = _run("trace", str(graph), "--out-json", str(out_json))
    assert r.returncode == 2
    assert "UnicodeEncodeError" not in r.stderr
    assert not out_json.exists()
