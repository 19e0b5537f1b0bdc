"""Solve an amphipod burrow diagram read from a file or standard input."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from burrow_search.errors import BurrowError
from burrow_search.puzzles.diagram import parse_diagram, render_diagram, unfold
from burrow_search.search.solver import SolveResult, SolverConfig, solve

VARIANTS = ("folded", "unfolded")


def _log(msg: str, *, err: bool = False) -> None:
    print(f"[solve] {msg}", file=sys.stderr if err else sys.stdout)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--input",
        type=Path,
        help="Diagram file (defaults to standard input).",
    )
    parser.add_argument(
        "--variant",
        choices=[*VARIANTS, "both"],
        default="both",
        help="Solve the diagram as drawn, with the hidden rows unfolded, or both.",
    )
    parser.add_argument(
        "--show-path", action="store_true", help="Print every state along the solution."
    )
    parser.add_argument(
        "--no-prune-settled",
        action="store_true",
        help="Also generate moves for tokens already resting at home.",
    )
    parser.add_argument("--max-expansions", type=int, help="Give up after this many states.")
    parser.add_argument(
        "--out",
        type=Path,
        help="Directory for moves_<variant>.csv and summary.json.",
    )
    return parser.parse_args(argv)


def _read_text(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.expanduser().read_text()


def _show_path(result: SolveResult) -> None:
    print(render_diagram(result.states[0]))
    for transition, state in zip(result.transitions, result.states[1:]):
        print()
        print(f": {transition.describe()}")
        print(render_diagram(state))
    print()


def _write_outputs(out_dir: Path, results: dict[str, SolveResult | None]) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    summary: dict[str, dict | None] = {}
    for variant, result in results.items():
        if result is None:
            summary[variant] = None
            continue
        result.to_frame().to_csv(out_dir / f"moves_{variant}.csv", index=False)
        summary[variant] = result.summary()
    (out_dir / "summary.json").write_text(json.dumps(summary, indent=2))
    _log(f"wrote results to {out_dir}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = SolverConfig(
        prune_settled=not args.no_prune_settled,
        max_expansions=args.max_expansions,
    )
    variants = VARIANTS if args.variant == "both" else (args.variant,)

    results: dict[str, SolveResult | None] = {}
    status = 0
    try:
        text = _read_text(args.input)
        for variant in variants:
            diagram = unfold(text) if variant == "unfolded" else text
            state = parse_diagram(diagram)
            result = solve(state, config)
            results[variant] = result
            if result is None:
                _log(f"{variant}: no solution")
                continue
            if args.show_path:
                _show_path(result)
            _log(
                f"{variant}: {result.energy} energy "
                f"(moves={result.num_moves}, expanded={result.expanded}, "
                f"runtime={result.runtime_s:.2f}s)"
            )
    except (BurrowError, OSError) as exc:
        _log(f"error: {exc}", err=True)
        status = 1

    if args.out is not None and results:
        _write_outputs(args.out.expanduser(), results)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
