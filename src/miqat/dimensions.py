from __future__ import annotations

from .models import CandidateList, Dimension, FormatConfig, Period, TimeValue, candidate_label

__all__ = [
    "active_dimensions",
    "candidate_label",
    "candidate_values",
    "candidates",
    "select_candidate",
    "selected_index",
]

MINUTES = tuple(range(60))
PERIODS = (Period.AM, Period.PM)


def active_dimensions(config: FormatConfig) -> list[Dimension]:
    dimensions = [Dimension.HOUR, Dimension.MINUTE]
    if config.show_seconds:
        dimensions.append(Dimension.SECOND)
    if config.is_12h:
        dimensions.append(Dimension.PERIOD)
    return dimensions


def candidate_values(dimension: Dimension | str, config: FormatConfig) -> tuple[int | Period, ...]:
    dimension = Dimension(dimension)
    if dimension is Dimension.HOUR:
        if config.is_12h:
            # 12 takes the slot of midnight/noon at the top of the wheel
            return tuple(hour or 12 for hour in range(12))
        return tuple(range(24))
    if dimension is Dimension.PERIOD:
        return PERIODS
    return MINUTES


def selected_index(dimension: Dimension | str, value: TimeValue, config: FormatConfig) -> int:
    """Position of ``value``'s field in the wheel for ``dimension``.

    Out-of-range numbers (which the parser lets through) map to positions
    past the end of the list; callers treat those as "nothing selected".
    """
    dimension = Dimension(dimension)
    if dimension is Dimension.HOUR:
        if config.is_12h and value.hour == 12:
            return 0
        return value.hour
    if dimension is Dimension.MINUTE:
        return value.minute
    if dimension is Dimension.SECOND:
        return value.second
    return 1 if value.period is Period.PM else 0


def candidates(dimension: Dimension | str, value: TimeValue, config: FormatConfig) -> CandidateList:
    dimension = Dimension(dimension)
    return CandidateList(
        dimension=dimension,
        values=candidate_values(dimension, config),
        selected_index=selected_index(dimension, value, config),
    )


def select_candidate(value: TimeValue, dimension: Dimension | str, candidate: int | Period | str) -> TimeValue:
    """Return ``value`` with only ``dimension`` replaced by ``candidate``."""
    dimension = Dimension(dimension)
    if dimension is Dimension.PERIOD:
        if not isinstance(candidate, Period):
            candidate = Period(str(candidate).upper())
    else:
        candidate = int(candidate)
    return value.with_field(dimension, candidate)
