from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class FormatOptionError(ValueError):
    """Raised when a picker is configured with an unknown time type or format."""


class Period(str, Enum):
    AM = "AM"
    PM = "PM"


class Dimension(str, Enum):
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    PERIOD = "period"


TIME_TYPES = {"12h": 12, "24h": 24}
FORMATS = {"HH:mm": False, "HH:mm:ss": True}


@dataclass(slots=True, frozen=True)
class FormatConfig:
    """How a time value is displayed: hour cycle and seconds visibility."""

    hour_cycle: int = 24
    show_seconds: bool = False

    @classmethod
    def from_options(cls, time_type: str = "24h", format: str = "HH:mm") -> "FormatConfig":
        if time_type not in TIME_TYPES:
            raise FormatOptionError(f"Unsupported time type: {time_type!r} (expected 12h or 24h)")
        if format not in FORMATS:
            raise FormatOptionError(f"Unsupported time format: {format!r} (expected HH:mm or HH:mm:ss)")
        return cls(hour_cycle=TIME_TYPES[time_type], show_seconds=FORMATS[format])

    @property
    def is_12h(self) -> bool:
        return self.hour_cycle == 12

    @property
    def time_type(self) -> str:
        return f"{self.hour_cycle}h"

    @property
    def format(self) -> str:
        return "HH:mm:ss" if self.show_seconds else "HH:mm"


@dataclass(slots=True, frozen=True)
class TimeValue:
    hour: int
    minute: int
    second: int = 0
    period: Period | None = None

    def with_field(self, dimension: Dimension | str, candidate: int | Period) -> "TimeValue":
        return replace(self, **{Dimension(dimension).value: candidate})


def candidate_label(candidate: int | Period) -> str:
    if isinstance(candidate, Period):
        return candidate.value
    return f"{candidate:02d}"


@dataclass(slots=True)
class CandidateList:
    dimension: Dimension
    values: tuple[int | Period, ...]
    selected_index: int

    @property
    def labels(self) -> list[str]:
        return [candidate_label(value) for value in self.values]

    @property
    def selected(self) -> int | Period | None:
        if 0 <= self.selected_index < len(self.values):
            return self.values[self.selected_index]
        return None


@dataclass(slots=True)
class EditorState:
    committed_text: str
    draft: TimeValue
    is_open: bool = False
