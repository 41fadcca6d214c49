"""Normalize raw venue snapshots into ordered, ID-stable draw histories.

Two raw shapes are accepted:

* current day: ``{"<gameNumber>": ["n1", ..., "n20"]}``
* multi-date: ``{"<date>": {"<gameNumber>": ["n1", ..., "n20"]}}``

Both produce a :class:`DrawHistory` ordered most recent first. Multi-date
input is re-indexed 1..N because per-day game numbers repeat across dates.
"""

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from loguru import logger

from keno_analytics.engine.combinatorics import POOL_SIZE
from keno_analytics.schemas.draws import Draw, DrawHistory

DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y")


def parse_numbers(values: Any, pool_size: int = POOL_SIZE) -> list[int]:
    """Parse number texts, dropping non-numeric, out-of-range and repeated values."""
    if not isinstance(values, Iterable) or isinstance(values, (str, bytes, Mapping)):
        return []

    numbers: list[int] = []
    seen: set[int] = set()
    for value in values:
        try:
            n = int(str(value).strip())
        except ValueError:
            continue
        if 1 <= n <= pool_size and n not in seen:
            seen.add(n)
            numbers.append(n)
    return numbers


def parse_draw_date(text: str) -> date | None:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(str(text).strip(), fmt).date()
        except ValueError:
            continue
    return None


def _game_number(key: Any) -> int | None:
    try:
        return int(str(key).strip())
    except ValueError:
        return None


def _descending(value: int | None) -> tuple[bool, int]:
    """Sort key placing larger values first and unknown values last."""
    return (value is None, -value if value is not None else 0)


def normalize_history(
    raw_by_date: Mapping[str, Mapping[str, Any]] | None,
    pool_size: int = POOL_SIZE,
) -> DrawHistory:
    """Merge a multi-date snapshot into one history and reassign sequence ids."""
    if not raw_by_date:
        return DrawHistory()

    entries: list[tuple[int | None, str, int | None, list[int]]] = []
    skipped = 0
    for date_key, games in raw_by_date.items():
        draw_date = parse_draw_date(date_key)
        if draw_date is None:
            logger.warning("Unrecognized draw date {!r}; ordering it last", date_key)
        if not isinstance(games, Mapping):
            logger.warning("Games for {!r} are not a mapping; ignoring", date_key)
            continue

        for game_key, values in games.items():
            numbers = parse_numbers(values, pool_size)
            if not numbers:
                skipped += 1
                logger.debug("Skipping game {} on {}: no valid numbers", game_key, date_key)
                continue
            ordinal = draw_date.toordinal() if draw_date else None
            entries.append((ordinal, str(date_key), _game_number(game_key), numbers))

    # The raw date key keeps draws of one unrecognized date together
    entries.sort(key=lambda e: (_descending(e[0]), e[1], _descending(e[2])))
    draws = tuple(
        Draw(sequence_id=i, numbers=tuple(numbers))
        for i, (_, _, _, numbers) in enumerate(entries, start=1)
    )
    if skipped:
        logger.debug("Normalized {} draws ({} skipped)", len(draws), skipped)
    return DrawHistory(draws=draws, skipped=skipped)


def normalize_current_day(
    raw: Mapping[str, Any] | None,
    pool_size: int = POOL_SIZE,
) -> DrawHistory:
    """Order a single day's games by game number, newest first.

    Game numbers are kept as sequence ids. If any of them is not a positive
    integer the day is re-indexed 1..N instead.
    """
    if not raw:
        return DrawHistory()

    entries: list[tuple[int | None, list[int]]] = []
    skipped = 0
    for game_key, values in raw.items():
        numbers = parse_numbers(values, pool_size)
        if not numbers:
            skipped += 1
            logger.debug("Skipping game {}: no valid numbers", game_key)
            continue
        entries.append((_game_number(game_key), numbers))

    entries.sort(key=lambda e: _descending(e[0]))
    ids = [game for game, _ in entries]
    if any(g is None or g < 1 for g in ids) or len(set(ids)) != len(ids):
        logger.debug("Current-day game numbers not usable as ids; re-indexing")
        ids = list(range(1, len(entries) + 1))

    draws = tuple(
        Draw(sequence_id=seq, numbers=tuple(numbers))
        for seq, (_, numbers) in zip(ids, entries)
    )
    return DrawHistory(draws=draws, skipped=skipped)
