import json
import logging
from pathlib import Path

import pytest

from graphwalk import cli

GRAPH_DOC = {
    "nodes": [{"data": {"id": n, "label": n}} for n in ["A", "B", "C", "D", "E"]],
    "edges": [
        {"data": {"source": "A", "target": "B", "weight": 4}},
        {"data": {"source": "B", "target": "C", "weight": 2}},
        {"data": {"source": "A", "target": "C", "weight": 3}},
        {"data": {"source": "C", "target": "D", "weight": 5}},
    ],
}


def extract_json_from_stdout(output: str) -> str:
    """Return the first balanced JSON object from stdout that may include status lines."""
    json_start = output.find("{")
    if json_start == -1:
        return output

    brace_count = 0
    for i in range(json_start, len(output)):
        if output[i] == "{":
            brace_count += 1
        elif output[i] == "}":
            brace_count -= 1
            if brace_count == 0:
                return output[json_start : i + 1]
    return output


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    path = tmp_path / "graph.json"
    path.write_text(json.dumps(GRAPH_DOC))
    return path


def test_bfs_writes_results_file(graph_file: Path, tmp_path: Path) -> None:
    results_path = tmp_path / "res.json"
    cli.main(["bfs", str(graph_file), "--start", "A", "--results", str(results_path)])
    assert json.loads(results_path.read_text()) == {"bfs_order": ["A", "B", "C", "D"]}


def test_dfs_default_results_path(graph_file: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    cli.main(["dfs", str(graph_file), "-s", "E"])
    data = json.loads((tmp_path / "graph.results.json").read_text())
    assert data == {"dfs_order": ["E"]}


def test_widest_stdout_without_file(graph_file: Path, tmp_path: Path, capsys) -> None:
    cli.main(
        ["widest", str(graph_file), "--src", "A", "--dest", "D", "--no-results", "--stdout"]
    )
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert payload == {
        "widest_path": ["A", "C", "D"],
        "widest_path_edges": [{"from": "A", "to": "C"}, {"from": "C", "to": "D"}],
        "widest_path_capacity": 3,
    }
    assert not (tmp_path / "graph.results.json").exists()


def test_widest_self_path_written_as_unbounded(graph_file: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "out"
    cli.main(["widest", str(graph_file), "--src", "C", "--dest", "C", "-o", str(out_dir)])
    data = json.loads((out_dir / "graph.results.json").read_text())
    assert data["widest_path"] == ["C"]
    assert data["widest_path_capacity"] == "unbounded"


def test_missing_node_exits_with_error(graph_file: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["bfs", str(graph_file), "--start", "Z", "--no-results"])
    assert exc_info.value.code == 1
    assert "NodeNotFound" in capsys.readouterr().out


def test_missing_graph_file_exits_with_error(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["bfs", str(tmp_path / "nope.json"), "--start", "A"])
    assert exc_info.value.code == 1
    assert "Graph file not found" in capsys.readouterr().out


def test_graph_path_is_directory_exits_with_error(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["bfs", str(tmp_path), "--start", "A", "--no-results"])
    assert exc_info.value.code == 1
    assert "Cannot read graph file" in capsys.readouterr().out


def test_inspect_directory_exits_with_error(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(tmp_path)])
    assert exc_info.value.code == 1
    assert "Cannot read graph file" in capsys.readouterr().out


def test_results_path_is_directory_exits_with_error(
    graph_file: Path, tmp_path: Path, capsys
) -> None:
    results_dir = tmp_path / "out"
    results_dir.mkdir()
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["bfs", str(graph_file), "--start", "A", "--results", str(results_dir)])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "Cannot write results to" in out
    assert "Results written to" not in out


def test_malformed_graph_exits_with_error(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.json"
    doc = {"nodes": ["A"], "edges": [{"source": "A", "target": "B", "weight": 1}]}
    path.write_text(json.dumps(doc))
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["widest", str(path), "--src", "A", "--dest", "A", "--no-results"])
    assert exc_info.value.code == 1
    assert "MalformedGraph" in capsys.readouterr().out


def test_non_positive_timeout_exits_with_error(graph_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["bfs", str(graph_file), "-s", "A", "--timeout", "0", "--no-results"])
    assert exc_info.value.code == 1


def test_generous_timeout_runs(graph_file: Path, capsys) -> None:
    cli.main(
        ["bfs", str(graph_file), "-s", "A", "--timeout", "60", "--no-results", "--stdout"]
    )
    payload = json.loads(extract_json_from_stdout(capsys.readouterr().out))
    assert payload == {"bfs_order": ["A", "B", "C", "D"]}


def test_widest_requires_src_and_dest(graph_file: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["widest", str(graph_file), "--src", "A"])
    assert exc_info.value.code == 2


def test_inspect_summary(graph_file: Path, capsys) -> None:
    cli.main(["inspect", str(graph_file)])
    out = capsys.readouterr().out
    assert "Nodes: 5" in out
    assert "Edges: 4" in out
    assert "Connected components: 2" in out
    assert "Isolated node: 1 (E)" in out
    assert "Graph is valid" in out


def test_inspect_detail_prints_edge_table(graph_file: Path, capsys) -> None:
    cli.main(["inspect", str(graph_file), "--detail"])
    out = capsys.readouterr().out
    assert "Source" in out and "Weight" in out


def test_inspect_invalid_graph(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("nodes: [A]\nedges:\n  - {source: A, target: A, weight: -1}\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "Invalid graph" in out
    assert "InvalidWeight" in out


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage" in capsys.readouterr().out.lower()


def test_verbose_and_quiet_switch_levels(graph_file: Path, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="graphwalk"):
        cli.main(["--verbose", "bfs", str(graph_file), "-s", "A", "--no-results"])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="graphwalk"):
        cli.main(["--quiet", "bfs", str(graph_file), "-s", "A", "--no-results"])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_format_duration() -> None:
    assert cli._format_duration(0.123) == "123.0 ms"
    assert cli._format_duration(1.234) == "1.23 s"
    assert cli._format_duration(75.2) == "1m 15.2s"
