"""
Tests for the command-line entry point.
"""

from search import cli


class TestCli:
    def test_bfs_run(self, grid_file, capsys) -> None:
        code = cli([str(grid_file), "BFS"])
        out = capsys.readouterr().out
        assert code == 0
        assert f"{grid_file} BFS" in out
        assert "Goal node reached:(3, 4)" in out
        assert "Path length:8" in out
        assert "(0, 0) -> (0, 1) -> (0, 2) -> (1, 2)" in out

    def test_metrics_stdout(self, grid_file, capsys) -> None:
        assert cli([str(grid_file), "AS", "--metrics-stdout"]) == 0
        out = capsys.readouterr().out
        assert "Metrics: method=astar" in out
        assert "path_length=8" in out

    def test_metrics_stderr(self, grid_file, capsys) -> None:
        cli([str(grid_file), "GBFS", "-m"])
        captured = capsys.readouterr()
        assert "Metrics: method=greedy" in captured.err
        assert "Metrics:" not in captured.out

    def test_compare(self, grid_file, capsys) -> None:
        cli([str(grid_file), "DFS", "--compare"])
        out = capsys.readouterr().out
        assert "path_length" in out
        assert "astar" in out

    def test_html(self, grid_file, tmp_path, capsys) -> None:
        out_file = tmp_path / "run.html"
        assert cli([str(grid_file), "BFS", "--html", str(out_file)]) == 0
        assert out_file.exists()

    def test_no_path(self, tmp_path, capsys) -> None:
        path = tmp_path / "blocked.txt"
        path.write_text("S#.\n.#T\n", encoding="utf-8")
        assert cli([str(path), "DFS"]) == 1
        assert "No possible path found" in capsys.readouterr().out

    def test_unknown_method(self, grid_file, capsys) -> None:
        assert cli([str(grid_file), "CUS1"]) == 2
        assert "Unknown method: CUS1" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys) -> None:
        assert cli([str(tmp_path / "nope.txt"), "BFS"]) == 2
        assert "Error: File not found" in capsys.readouterr().out

    def test_missing_endpoint(self, tmp_path, capsys) -> None:
        path = tmp_path / "no_target.txt"
        path.write_text("S..\n...\n", encoding="utf-8")
        assert cli([str(path), "BFS"]) == 2
        assert "needs both a start" in capsys.readouterr().out
