import io
import json

import pandas as pd

from burrow_search import cli
from burrow_search.puzzles.diagram import unfold
from burrow_search.puzzles.samples import (
    ALMOST_SOLVED_DIAGRAM,
    ALMOST_SOLVED_ENERGY,
    SAMPLE_DIAGRAM,
    SAMPLE_FOLDED_ENERGY,
)


def test_cli_solves_folded_sample_from_file(tmp_path, capsys):
    diagram = tmp_path / "burrow.txt"
    diagram.write_text(SAMPLE_DIAGRAM)
    out_dir = tmp_path / "out"

    code = cli.main(["--input", str(diagram), "--variant", "folded", "--out", str(out_dir)])

    assert code == 0
    stdout = capsys.readouterr().out
    assert f"[solve] folded: {SAMPLE_FOLDED_ENERGY} energy" in stdout
    moves = pd.read_csv(out_dir / "moves_folded.csv")
    assert moves["energy"].sum() == SAMPLE_FOLDED_ENERGY
    summary = json.loads((out_dir / "summary.json").read_text())
    assert summary["folded"]["energy"] == SAMPLE_FOLDED_ENERGY


def test_cli_reads_stdin_and_shows_path(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(ALMOST_SOLVED_DIAGRAM))

    code = cli.main(["--variant", "folded", "--show-path"])

    assert code == 0
    stdout = capsys.readouterr().out
    assert ": D H7->D1 (3000 energy)" in stdout
    assert "###A#B#C#D###" in stdout
    assert f"folded: {ALMOST_SOLVED_ENERGY} energy" in stdout


def test_cli_reports_unsolvable_burrow(tmp_path, capsys):
    diagram = tmp_path / "deadlock.txt"
    diagram.write_text(
        "#############\n#AC.D.A.B.CD#\n###.#.#.#.###\n  #.#B#.#.#\n  #########\n"
    )

    code = cli.main(["--input", str(diagram), "--variant", "folded", "--out", str(tmp_path)])

    assert code == 0
    assert "[solve] folded: no solution" in capsys.readouterr().out
    assert json.loads((tmp_path / "summary.json").read_text()) == {"folded": None}


def test_cli_rejects_malformed_input(tmp_path, capsys):
    diagram = tmp_path / "bad.txt"
    diagram.write_text(SAMPLE_DIAGRAM.replace("B#D", "B#Z"))

    code = cli.main(["--input", str(diagram)])

    assert code == 1
    captured = capsys.readouterr()
    assert "[solve] error: Unknown amphipod code 'Z'" in captured.err
    assert captured.out == ""


def test_cli_budget_exhaustion_fails(tmp_path, capsys):
    diagram = tmp_path / "burrow.txt"
    diagram.write_text(SAMPLE_DIAGRAM)

    code = cli.main(["--input", str(diagram), "--variant", "unfolded", "--max-expansions", "3"])

    assert code == 1
    assert "gave up after 3 expansions" in capsys.readouterr().err


def test_cli_reports_missing_input_file(tmp_path, capsys):
    code = cli.main(["--input", str(tmp_path / "missing.txt")])

    assert code == 1
    captured = capsys.readouterr()
    assert "[solve] error:" in captured.err
    assert captured.out == ""


def test_cli_refuses_to_unfold_a_four_deep_diagram(tmp_path, capsys):
    diagram = tmp_path / "four_deep.txt"
    diagram.write_text(unfold(SAMPLE_DIAGRAM))

    code = cli.main(["--input", str(diagram), "--variant", "unfolded"])

    assert code == 1
    assert "Only 2-deep diagrams can be unfolded" in capsys.readouterr().err


def test_cli_keeps_earlier_results_when_a_later_variant_gives_up(tmp_path, capsys):
    diagram = tmp_path / "burrow.txt"
    diagram.write_text(ALMOST_SOLVED_DIAGRAM)
    out_dir = tmp_path / "out"

    args = ["--input", str(diagram), "--variant", "both", "--max-expansions", "5"]
    code = cli.main([*args, "--out", str(out_dir)])

    assert code == 1
    captured = capsys.readouterr()
    assert f"[solve] folded: {ALMOST_SOLVED_ENERGY} energy" in captured.out
    assert "gave up after 5 expansions" in captured.err
    summary = json.loads((out_dir / "summary.json").read_text())
    assert list(summary) == ["folded"]
    assert summary["folded"]["energy"] == ALMOST_SOLVED_ENERGY
    assert pd.read_csv(out_dir / "moves_folded.csv")["energy"].sum() == ALMOST_SOLVED_ENERGY
    assert not (out_dir / "moves_unfolded.csv").exists()
