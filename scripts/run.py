"""Cross-platform task runner for burrow-search.

All commands use the currently active Python interpreter (sys.executable) so they work
on POSIX and Windows without Make.
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import tempfile
from pathlib import Path

ARTIFACTS_ENV = "ARTIFACTS"
DEFAULT_ARTIFACTS = "artifacts"


class RunError(Exception):
    """Raised when an invoked command fails."""


def _log(msg: str) -> None:
    print(f"[run] {msg}")


def _run(cmd: list[str], *, env: dict[str, str] | None = None) -> None:
    _log("$ " + " ".join(cmd))
    result = subprocess.run(cmd, env=env)
    if result.returncode != 0:
        raise RunError(f"Command failed with exit code {result.returncode}: {' '.join(cmd)}")


def _artifacts_root() -> Path:
    return Path(os.environ.get(ARTIFACTS_ENV, DEFAULT_ARTIFACTS))


def cmd_lint(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "check", "."])
    _run([sys.executable, "-m", "ruff", "format", "--check", "."])


def cmd_format(_: argparse.Namespace) -> None:
    _run([sys.executable, "-m", "ruff", "format", "."])
    _run([sys.executable, "-m", "ruff", "check", "--fix", "."])


def cmd_test(args: argparse.Namespace) -> None:
    pytest_cmd = [sys.executable, "-m", "pytest"]
    if args.quiet:
        pytest_cmd.append("-q")
    _run(pytest_cmd)


def _solve_cmd(input_path: Path, args: argparse.Namespace) -> list[str]:
    cmd = [
        sys.executable,
        "-m",
        "burrow_search.cli",
        "--input",
        str(input_path),
        "--variant",
        args.variant,
    ]
    if args.show_path:
        cmd.append("--show-path")
    if args.max_expansions is not None:
        cmd += ["--max-expansions", str(args.max_expansions)]
    if not args.no_out:
        out_dir = args.out or (_artifacts_root() / "solve" / input_path.stem)
        cmd += ["--out", str(out_dir)]
    return cmd


def cmd_solve(args: argparse.Namespace) -> None:
    if not args.input.exists():
        raise RunError(f"Diagram not found: {args.input}")
    _run(_solve_cmd(args.input, args))


def cmd_sample(args: argparse.Namespace) -> None:
    from burrow_search.puzzles.samples import SAMPLE_DIAGRAM

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "sample.txt"
        path.write_text(SAMPLE_DIAGRAM)
        _run(_solve_cmd(path, args))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    lint_p = sub.add_parser("lint", help="Run ruff checks")
    lint_p.set_defaults(func=cmd_lint)

    fmt_p = sub.add_parser("format", help="Apply ruff format and fixes")
    fmt_p.set_defaults(func=cmd_format)

    test_p = sub.add_parser("test", help="Run pytest")
    test_p.add_argument("--quiet", action="store_true", help="Quiet pytest output")
    test_p.set_defaults(func=cmd_test)

    def add_solver_flags(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--variant", choices=["folded", "unfolded", "both"], default="both"
        )
        sp.add_argument("--show-path", action="store_true", help="Print the solution states")
        sp.add_argument("--max-expansions", type=int, help="Search budget per variant")
        sp.add_argument(
            "--out", type=Path, help="Output directory (default $ARTIFACTS/solve/<input stem>)"
        )
        sp.add_argument("--no-out", action="store_true", help="Skip writing CSV/JSON results")

    solve_p = sub.add_parser("solve", help="Solve a diagram file")
    solve_p.add_argument("input", type=Path, help="Path to the burrow diagram")
    add_solver_flags(solve_p)
    solve_p.set_defaults(func=cmd_solve)

    sample_p = sub.add_parser("sample", help="Solve the documented sample burrow")
    add_solver_flags(sample_p)
    sample_p.set_defaults(func=cmd_sample)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except RunError as exc:  # pragma: no cover - simple CLI error
        _log(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
