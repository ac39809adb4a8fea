"""Flat tabular export of a scored board."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import polars as pl

from prop_confidence.board import ScoredProp, confidence_level
from prop_confidence.factors.registry import list_factors

REPORT_FORMATS: tuple[str, ...] = ("csv", "parquet", "json")

_BASE_SCHEMA: list[tuple[str, Any]] = [
    ("id", pl.Utf8),
    ("league", pl.Utf8),
    ("player", pl.Utf8),
    ("team", pl.Utf8),
    ("position", pl.Utf8),
    ("prop_type", pl.Utf8),
    ("direction", pl.Utf8),
    ("line", pl.Float64),
    ("odds", pl.Int64),
    ("market", pl.Utf8),
    ("percentage", pl.Int64),
    ("level", pl.Utf8),
]


def _confidence_column(factor_id: str) -> str:
    return f"{factor_id}_confidence"


def report_schema() -> list[tuple[str, Any]]:
    factor_columns = [
        (_confidence_column(factor.info.id), pl.Float64) for factor in list_factors()
    ]
    return [*_BASE_SCHEMA, *factor_columns]


def report_row(scored: ScoredProp) -> dict[str, Any]:
    card = scored.card
    row: dict[str, Any] = {
        "id": card.id,
        "league": card.league,
        "player": card.player.name,
        "team": card.player.team,
        "position": card.player.position,
        "prop_type": card.prop.type,
        "direction": card.prop.direction,
        "line": card.prop.line,
        "odds": card.prop.odds,
        "market": card.prop.market,
        "percentage": scored.percentage,
        "level": confidence_level(scored.percentage),
    }
    for factor_id, result in scored.report.analysis.items():
        row[_confidence_column(factor_id)] = result.confidence
    return row


def _enforce_schema(frame: pl.DataFrame) -> pl.DataFrame:
    schema = report_schema()
    columns = [name for name, _ in schema]
    working = frame
    for name, dtype in schema:
        if name not in working.columns:
            working = working.with_columns(pl.lit(None).cast(dtype).alias(name))
        else:
            working = working.with_columns(pl.col(name).cast(dtype, strict=False))
    return working.select(columns)


def build_report_frame(scored: Iterable[ScoredProp]) -> pl.DataFrame:
    """One row per scored prop, highest confidence first."""
    rows = [report_row(item) for item in scored]
    if not rows:
        return pl.DataFrame(schema=dict(report_schema()))
    frame = _enforce_schema(pl.DataFrame(rows))
    return frame.sort(["percentage", "id"], descending=[True, False])


def write_report(frame: pl.DataFrame, path: Path, *, fmt: str = "csv") -> Path:
    normalized = fmt.strip().lower()
    if normalized not in REPORT_FORMATS:
        options = ",".join(REPORT_FORMATS)
        raise ValueError(f"unsupported report format: {fmt} (options: {options})")
    path.parent.mkdir(parents=True, exist_ok=True)
    if normalized == "csv":
        frame.write_csv(path)
    elif normalized == "parquet":
        frame.write_parquet(path, compression="zstd")
    else:
        frame.write_json(path)
    return path
