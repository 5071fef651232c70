from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from .models import FormatConfig, Period, TimeValue

_LOGGER = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def default_value(config: FormatConfig) -> TimeValue:
    """Canonical value used when a non-empty string cannot be parsed."""
    if config.is_12h:
        return TimeValue(hour=12, minute=0, second=0, period=Period.AM)
    return TimeValue(hour=0, minute=0, second=0)


def now_value(config: FormatConfig, clock: Clock | None = None) -> TimeValue:
    moment = (clock or datetime.now)()
    if config.is_12h:
        return TimeValue(
            hour=moment.hour % 12 or 12,
            minute=moment.minute,
            second=moment.second,
            period=Period.PM if moment.hour >= 12 else Period.AM,
        )
    return TimeValue(hour=moment.hour, minute=moment.minute, second=moment.second)


def _digits(value: str, min_width: int, max_width: int) -> int | None:
    if not (min_width <= len(value) <= max_width):
        return None
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def _split_period(value: str) -> tuple[str, Period] | None:
    suffix = value[-2:].upper()
    if len(value) < 2 or suffix not in (Period.AM.value, Period.PM.value):
        return None
    return value[:-2].rstrip(), Period(suffix)


def _match(value: str, config: FormatConfig) -> TimeValue | None:
    clock_part = value
    period: Period | None = None
    if config.is_12h:
        split = _split_period(value)
        if split is None:
            return None
        clock_part, period = split
    parts = clock_part.split(":")
    if len(parts) != (3 if config.show_seconds else 2):
        return None
    hour = _digits(parts[0], 1, 2)
    minute = _digits(parts[1], 2, 2)
    second = _digits(parts[2], 2, 2) if config.show_seconds else 0
    if hour is None or minute is None or second is None:
        return None
    return TimeValue(hour=hour, minute=minute, second=second, period=period)


def parse_time(value: str, config: FormatConfig, clock: Clock | None = None) -> TimeValue:
    """Parse ``HH:MM[:SS][ AM|PM]`` under ``config``.

    An empty string yields the current wall-clock time; anything else that
    does not match the configured shape yields :func:`default_value`.
    Numbers are taken as written, so ``"99:99"`` is accepted verbatim.
    """
    if not value:
        return now_value(config, clock)
    parsed = _match(value, config)
    if parsed is None:
        _LOGGER.debug("Unparseable time %r for %s/%s, using default", value, config.time_type, config.format)
        return default_value(config)
    return parsed


def format_time(value: TimeValue, config: FormatConfig) -> str:
    text = f"{value.hour:02d}:{value.minute:02d}"
    if config.show_seconds:
        text = f"{text}:{value.second:02d}"
    if config.is_12h:
        period = value.period or Period.AM
        text = f"{text} {period.value}"
    return text


def scroll_offset(index: int, item_extent: float, viewport_extent: float) -> float:
    """Offset that centres entry ``index`` in a viewport of ``viewport_extent``."""
    return index * item_extent - viewport_extent / 2 + item_extent / 2
