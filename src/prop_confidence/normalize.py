"""Normalization of loosely shaped prop payloads into engine records.

Payloads come from JSON files and UI code, so both camelCase
(`recentStats`, `lineMovement`) and snake_case keys are accepted.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from prop_confidence.models import (
    DIRECTIONS,
    HistoricalProp,
    OpponentDefense,
    Player,
    Prop,
    PropCard,
)

_TDS_ALLOWED_RE = re.compile(r"^(?P<stat>[A-Za-z0-9_]+?)(TDsAllowed|_tds_allowed)$")
_ALLOWED_RE = re.compile(r"^(?P<stat>[A-Za-z0-9_]+?)(Allowed|_allowed)$")


class PropInputError(ValueError):
    """Raised when a payload cannot be turned into scoring inputs."""


def _expect_dict(value: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise PropInputError(f"{context} must be an object")
    return value


def _expect_list(value: Any, context: str) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise PropInputError(f"{context} must be a list")
    return list(value)


def _get(payload: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return default


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _float_or_none(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        raw = _text(value)
        if not raw:
            return None
        try:
            parsed = float(raw)
        except ValueError:
            return None
    if not math.isfinite(parsed):
        return None
    return parsed


def _require_float(value: Any, context: str) -> float:
    parsed = _float_or_none(value)
    if parsed is None:
        raise PropInputError(f"{context} must be a finite number")
    return parsed


def _optional_float(value: Any, context: str, *, default: float) -> float:
    if value is None:
        return default
    return _require_float(value, context)


def _optional_int(value: Any, context: str) -> int | None:
    if value is None:
        return None
    parsed = _require_float(value, context)
    if not parsed.is_integer():
        raise PropInputError(f"{context} must be an integer")
    return int(parsed)


def _float_map(value: Any, context: str) -> dict[str, float]:
    if value is None:
        return {}
    payload = _expect_dict(value, context)
    return {
        _text(key): _require_float(raw, f"{context}.{key}")
        for key, raw in payload.items()
        if _text(key)
    }


def _recent_value(entry: Any, *, stat_type: str, context: str) -> float | None:
    if isinstance(entry, Mapping):
        if stat_type not in entry:
            return None
        return _require_float(entry[stat_type], f"{context}.{stat_type}")
    return _require_float(entry, context)


def normalize_historical_prop(payload: Any, *, context: str = "historical_prop") -> HistoricalProp:
    item = _expect_dict(payload, context)
    return HistoricalProp(
        line=_require_float(item.get("line"), f"{context}.line"),
        result=_require_float(item.get("result"), f"{context}.result"),
        type=_text(item.get("type")),
    )


def normalize_player(payload: Any, *, stat_type: str = "") -> Player:
    """Build a Player; per-game mapping entries resolve to `stat_type`."""
    item = _expect_dict(payload, "player")
    name = _text(item.get("name"))
    if not name:
        raise PropInputError("player.name is required")

    recent_raw = _expect_list(
        _get(item, "recentStats", "recent_stats", default=[]),
        "player.recent_stats",
    )
    recent: list[float] = []
    for index, entry in enumerate(recent_raw):
        value = _recent_value(entry, stat_type=stat_type, context=f"player.recent_stats[{index}]")
        if value is not None:
            recent.append(value)

    history_raw = _expect_list(
        _get(item, "historicalProps", "historical_props", default=[]),
        "player.historical_props",
    )
    history = tuple(
        normalize_historical_prop(entry, context=f"player.historical_props[{index}]")
        for index, entry in enumerate(history_raw)
    )

    return Player(
        name=name,
        team=_text(item.get("team")),
        position=_text(item.get("position")).upper(),
        recent_stats=tuple(recent),
        season_stats=_float_map(_get(item, "seasonStats", "season_stats"), "player.season_stats"),
        career_stats=_float_map(_get(item, "careerStats", "career_stats"), "player.career_stats"),
        historical_props=history,
    )


def normalize_prop(payload: Any) -> Prop:
    item = _expect_dict(payload, "prop")
    stat_type = _text(item.get("type"))
    if not stat_type:
        raise PropInputError("prop.type is required")
    direction = _text(item.get("direction")).lower()
    if direction not in DIRECTIONS:
        raise PropInputError(f"prop.direction must be one of {','.join(DIRECTIONS)}: {direction!r}")
    return Prop(
        type=stat_type,
        line=_require_float(item.get("line"), "prop.line"),
        direction=direction,
        odds=_optional_int(item.get("odds"), "prop.odds"),
        market=_text(item.get("market")),
        line_movement=_optional_float(
            _get(item, "lineMovement", "line_movement"), "prop.line_movement", default=0.0
        ),
        sharp_action=_optional_float(
            _get(item, "sharpAction", "sharp_action"), "prop.sharp_action", default=50.0
        ),
    )


def normalize_opponent_defense(payload: Any) -> OpponentDefense:
    """Split `{stat}Allowed` / `{stat}TDsAllowed` keys into per-stat mappings."""
    item = _expect_dict(payload if payload is not None else {}, "opponent")
    ranks_raw = _expect_dict(item.get("ranks") or {}, "opponent.ranks")
    ranks: dict[str, int] = {}
    for position, raw in ranks_raw.items():
        rank = _optional_int(raw, f"opponent.ranks.{position}")
        # 0 means unranked; rank_for falls back to the unranked sentinel.
        if rank is None or rank == 0:
            continue
        if rank < 0:
            raise PropInputError(f"opponent.ranks.{position} must be a positive rank")
        ranks[_text(position).upper()] = rank

    allowed: dict[str, float] = {}
    touchdowns: dict[str, float] = {}
    extras: dict[str, float] = {}
    for key, raw in item.items():
        if key == "ranks":
            continue
        name = _text(key)
        td_match = _TDS_ALLOWED_RE.match(name)
        if td_match:
            touchdowns[td_match.group("stat")] = _require_float(raw, f"opponent.{name}")
            continue
        allowed_match = _ALLOWED_RE.match(name)
        if allowed_match:
            allowed[allowed_match.group("stat")] = _require_float(raw, f"opponent.{name}")
            continue
        value = _float_or_none(raw)
        if value is not None:
            extras[name] = value

    return OpponentDefense(
        ranks=ranks,
        allowed=allowed,
        touchdowns_allowed=touchdowns,
        extras=extras,
    )


def normalize_card(payload: Any, *, league: str = "") -> PropCard:
    """Build a PropCard from `{id, league, player, prop, opponent}`."""
    item = _expect_dict(payload, "card")
    prop = normalize_prop(item.get("prop"))
    player = normalize_player(item.get("player"), stat_type=prop.type)
    card_id = _text(item.get("id")) or _default_card_id(player, prop)
    return PropCard(
        id=card_id,
        league=_text(item.get("league")).lower() or league,
        player=player,
        prop=prop,
        opponent=normalize_opponent_defense(_get(item, "opponent", "opponent_defense")),
    )


def normalize_cards(payload: Any, *, league: str = "") -> list[PropCard]:
    """Accept a single card object, a list of cards, or `{"props": [...]}`."""
    if isinstance(payload, Mapping) and "props" in payload:
        payload = payload["props"]
    if isinstance(payload, Mapping):
        return [normalize_card(payload, league=league)]
    items = _expect_list(payload, "cards")
    return [normalize_card(entry, league=league) for entry in items]


def _default_card_id(player: Player, prop: Prop) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", f"{player.name} {prop.type}".lower()).strip("-")
    return slug or "prop"
