# tests/test_cli.py
import importlib

import pytest

from wgraph import config
from wgraph.cli import main, make_parser, parse_edge


def test_parse_edge():
    assert parse_edge("A-B:2.5") == ("A", "B", 2.5)
    assert parse_edge("A-B") == ("A", "B", 1.0)


@pytest.mark.parametrize("token", ["AB:1", "A-:1", "A-B:x"])
def test_parse_edge_invalid(token):
    with pytest.raises(ValueError):
        parse_edge(token)


def test_show(capsys):
    assert main(["show", "A-B:1", "A-C:1", "--vertex", "D"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Vertex A is connected to: B C",
        "Vertex B is connected to: A",
        "Vertex C is connected to: A",
        "Vertex D is connected to:",
    ]


def test_bfs(capsys):
    main(["bfs", "--start", "A", "A-B", "A-C", "B-D"])
    assert capsys.readouterr().out.strip() == "A B C D"


def test_dijkstra(capsys):
    main(["dijkstra", "--start", "A", "A-B:1", "A-C:4", "B-C:1", "--vertex", "Z"])
    assert capsys.readouterr().out.splitlines() == ["A: 0.0", "B: 1.0", "C: 2.0", "Z: inf"]


def test_path(capsys):
    main(["path", "--from", "A", "--to", "C", "A-B:1", "A-C:4", "B-C:1"])
    assert capsys.readouterr().out.splitlines() == ["Path: A B C", "Cost: 2.0"]


def test_unknown_vertex_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["bfs", "--start", "Q", "A-B:1"])
    assert exc.value.code == 2


def test_bad_edge_exits():
    with pytest.raises(SystemExit) as exc:
        main(["show", "A-B:oops"])
    assert exc.value.code == 2


@pytest.mark.parametrize("token", ["New-York-Boston:3", "A-B:nan", "A-B:inf"])
def test_parse_edge_rejects_extra_separator_and_non_finite(token):
    with pytest.raises(ValueError):
        parse_edge(token)


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("WGRAPH_LOG_LEVEL", "debug")
    try:
        importlib.reload(config)
        assert make_parser().parse_args(["show"]).log_level == "DEBUG"
    finally:
        monkeypatch.delenv("WGRAPH_LOG_LEVEL", raising=False)
        importlib.reload(config)


def test_log_level_flag(capsys):
    args = make_parser().parse_args(["--log-level", "info", "show"])
    assert args.log_level == "INFO"
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "verbose", "show"])
    assert exc.value.code == 2
