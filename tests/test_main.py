"""Tests for the command-line entry point."""

from weatherroute import config
from weatherroute.config import resolve_log_level
from weatherroute.main import main


class TestMain:
    """Tests for main()."""

    def test_demo_route(self, capsys):
        assert main(["A", "E"]) == 0
        out = capsys.readouterr().out
        assert "Path found: A → B → D → E" in out
        assert "17.5" in out
        assert "A → B" in out

    def test_same_node(self, capsys):
        assert main(["A", "A"]) == 0
        out = capsys.readouterr().out
        assert "Start and goal nodes are the same" in out
        assert "0.0" in out

    def test_no_path(self, capsys):
        assert main(["A", "E", "--remove", "D"]) == 0
        assert "No path found between A and E" in capsys.readouterr().out

    def test_via(self, capsys):
        assert main(["A", "E", "--via", "C"]) == 0
        out = capsys.readouterr().out
        assert "A → C → D → E" in out
        assert "19.5" in out

    def test_empty_network(self, capsys):
        code = main([
            "S", "T", "--empty",
            "--node", "S", "0", "0", "0",
            "--node", "T", "100", "0", "1.5",
            "--edge", "S", "T", "4",
        ])
        assert code == 0
        assert "5.5" in capsys.readouterr().out

    def test_unknown_node(self, capsys):
        assert main(["A", "Unknown"]) == 1
        assert "Node not found: Unknown" in capsys.readouterr().err

    def test_invalid_edge(self, capsys):
        assert main(["A", "E", "--edge", "A", "A", "1"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_non_numeric_cost(self, capsys):
        assert main(["A", "E", "--node", "F", "x", "0", "0"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_non_finite_coordinate(self, capsys):
        assert main(["A", "E", "--node", "F", "nan", "0", "0"]) == 1
        assert "Coordinate must be finite" in capsys.readouterr().err

    def test_unknown_log_level_falls_back(self, capsys, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", resolve_log_level("LOUD"))
        assert main(["A", "E"]) == 0
        assert "Path found" in capsys.readouterr().out


class TestResolveLogLevel:
    """Tests for log level parsing."""

    def test_known_names(self):
        assert resolve_log_level("debug") == "DEBUG"
        assert resolve_log_level("Info") == "INFO"

    def test_unset(self):
        assert resolve_log_level(None) == "WARNING"
        assert resolve_log_level("") == "WARNING"

    def test_unknown_name(self):
        assert resolve_log_level("LOUD") == "WARNING"
