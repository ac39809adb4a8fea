"""CLI entrypoint for prop-confidence."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from prop_confidence.board import (
    ScoredProp,
    build_board,
    confidence_level,
    filter_by_position,
    find_prop,
    render_analysis_markdown,
    render_board_lines,
    scored_prop_payload,
)
from prop_confidence.factors import get_factor, list_factors
from prop_confidence.models import PropCard
from prop_confidence.normalize import normalize_cards
from prop_confidence.report import REPORT_FORMATS, build_report_frame, write_report
from prop_confidence.runtime_config import load_runtime_config, set_current_runtime_config
from prop_confidence.samples import SAMPLE_LEAGUES, sample_cards
from prop_confidence.settings import Settings

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    """User-facing CLI error."""


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _apply_runtime_config(args: argparse.Namespace) -> Settings:
    config_arg = str(getattr(args, "config", "") or "").strip()
    try:
        config = load_runtime_config(Path(config_arg) if config_arg else None)
    except RuntimeError as exc:
        raise CLIError(str(exc)) from exc
    reports_arg = str(getattr(args, "reports_dir", "") or "").strip()
    if reports_arg:
        config = config.with_path_overrides(reports_dir=Path(reports_arg).expanduser().resolve())
    set_current_runtime_config(config)
    logger.debug("runtime config: %s", config.config_path)
    return Settings.from_runtime()


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"input file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def _resolve_league(raw: str, settings: Settings) -> str:
    league = (raw or settings.board_default_league).strip().lower()
    if league != "all" and league not in SAMPLE_LEAGUES:
        options = ",".join(("all", *SAMPLE_LEAGUES))
        raise CLIError(f"unknown league: {raw} (options: {options})")
    return league


def _load_cards(args: argparse.Namespace, settings: Settings) -> list[PropCard]:
    input_arg = str(getattr(args, "input", "") or "").strip()
    if input_arg:
        return normalize_cards(_load_json(Path(input_arg)))
    return sample_cards(_resolve_league(getattr(args, "league", ""), settings))


def _scored_board(args: argparse.Namespace, settings: Settings) -> list[ScoredProp]:
    cards = _load_cards(args, settings)
    return build_board(
        cards,
        weather=settings.weather_provider(),
        venue=settings.venue_provider(),
    )


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _cmd_factors(args: argparse.Namespace) -> int:
    del args
    for factor in list_factors():
        print(f"{factor.info.id}\t{factor.info.weight:.2f}\t{factor.info.description}")
    return 0


def _cmd_board(args: argparse.Namespace) -> int:
    settings = args.settings
    board = filter_by_position(_scored_board(args, settings), args.position)
    min_confidence = (
        args.min_confidence if args.min_confidence is not None else settings.board_min_confidence
    )
    shown = [item for item in board if item.percentage >= min_confidence]
    shown.sort(key=lambda item: (-item.percentage, item.id))
    if args.json:
        _print_json([scored_prop_payload(item) for item in shown])
        return 0
    if not shown:
        print("no props meet criteria")
        return 0
    for line in render_board_lines(shown):
        print(line)
    return 0


def _print_factor(scored: ScoredProp, raw_factor: str, *, as_json: bool) -> int:
    factor_id = get_factor(raw_factor).info.id
    result = scored.report.analysis[factor_id]
    if as_json:
        _print_json({"id": scored.id, "factor": factor_id, **result.to_dict()})
        return 0
    shown = "n/a" if result.confidence is None else f"{result.confidence:g}"
    print(f"{scored.id}\t{factor_id}\t{shown}\t{result.reasoning}")
    return 0


def _cmd_explain(args: argparse.Namespace) -> int:
    board = _scored_board(args, args.settings)
    scored = find_prop(board, args.prop_id)
    if scored is None:
        options = ",".join(item.id for item in board)
        raise CLIError(f"unknown prop id: {args.prop_id} (options: {options})")
    if args.factor:
        return _print_factor(scored, args.factor, as_json=args.json)
    if args.json:
        _print_json(scored_prop_payload(scored))
        return 0
    print(render_analysis_markdown(scored))
    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    board = _scored_board(args, args.settings)
    if args.json:
        _print_json([scored_prop_payload(item) for item in board])
        return 0
    for item in board:
        print(f"{item.id}\t{item.percentage}%\t{confidence_level(item.percentage)}")
        for factor_id, result in item.report.analysis.items():
            print(f"  {factor_id}: {result.reasoning}")
    return 0


def _cmd_report(args: argparse.Namespace) -> int:
    settings = args.settings
    fmt = (args.format or settings.report_default_format).strip().lower()
    if fmt not in REPORT_FORMATS:
        options = ",".join(REPORT_FORMATS)
        raise CLIError(f"unsupported report format: {fmt} (options: {options})")
    out_arg = str(args.out or "").strip()
    out_path = (
        Path(out_arg).expanduser()
        if out_arg
        else Path(settings.reports_dir) / f"prop_confidence.{fmt}"
    )
    frame = build_report_frame(_scored_board(args, settings))
    written = write_report(frame, out_path, fmt=fmt)
    print(f"wrote {frame.height} rows to {written}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="prop-confidence")
    parser.add_argument(
        "--config",
        default="",
        help="Path to runtime config TOML (default: config/runtime.toml).",
    )
    parser.add_argument(
        "--reports-dir",
        default="",
        help="Override reports output dir for this command invocation.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command")

    factors = subparsers.add_parser("factors", help="List confidence factors and weights")
    factors.set_defaults(func=_cmd_factors)

    board = subparsers.add_parser("board", help="Show the scored prop board")
    board.set_defaults(func=_cmd_board)
    board.add_argument("--league", default="")
    board.add_argument("--input", default="", help="JSON file of prop cards.")
    board.add_argument("--position", default="all")
    board.add_argument("--min-confidence", type=int, default=None)
    board.add_argument("--json", action="store_true")

    explain = subparsers.add_parser("explain", help="Show the analysis brief for one prop")
    explain.set_defaults(func=_cmd_explain)
    explain.add_argument("prop_id")
    explain.add_argument("--league", default="")
    explain.add_argument("--input", default="", help="JSON file of prop cards.")
    explain.add_argument("--factor", default="", help="Show one factor (id or alias).")
    explain.add_argument("--json", action="store_true")

    score_cmd = subparsers.add_parser("score", help="Score prop cards from a JSON file")
    score_cmd.set_defaults(func=_cmd_score)
    score_cmd.add_argument("--input", required=True, help="JSON file of prop cards.")
    score_cmd.add_argument("--json", action="store_true")

    report = subparsers.add_parser("report", help="Write a tabular confidence report")
    report.set_defaults(func=_cmd_report)
    report.add_argument("--out", default="")
    report.add_argument("--format", default="", help=f"One of {','.join(REPORT_FORMATS)}.")
    report.add_argument("--league", default="")
    report.add_argument("--input", default="", help="JSON file of prop cards.")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(bool(getattr(args, "verbose", False)))
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 0
    try:
        args.settings = _apply_runtime_config(args)
        return int(func(args))
    except (CLIError, FileNotFoundError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
