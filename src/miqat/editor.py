"""Draft/commit state machine behind the time picker."""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from .dimensions import active_dimensions, candidate_values, candidates, select_candidate
from .models import CandidateList, Dimension, EditorState, FormatConfig, Period, TimeValue
from .timeutils import Clock, format_time, parse_time, scroll_offset

_LOGGER = logging.getLogger(__name__)


class ScrollSurface(Protocol):
    """Anything the editor can ask to bring an offset into view."""

    @property
    def viewport_extent(self) -> float: ...

    def scroll_to_offset(self, offset: float) -> None: ...


class TimeEditor:
    """Owns the committed text, the open flag and the draft value.

    The committed text belongs to the caller; the editor only hears about it
    through :meth:`external_value_changed`. Every pick while open is reported
    through ``on_change`` with the freshly formatted draft. Nothing here
    raises to the caller: bad text degrades to the parser's fallback.
    """

    def __init__(
        self,
        value: str = "",
        *,
        config: FormatConfig | None = None,
        on_change: Callable[[str], None] | None = None,
        clock: Clock | None = None,
        item_extent: float = 1,
    ) -> None:
        self.config = config or FormatConfig()
        self.item_extent = item_extent
        self._on_change = on_change
        self._clock = clock
        self._surfaces: dict[Dimension, ScrollSurface] = {}
        self.on_draft_changed: Callable[[TimeValue], None] | None = None
        self.state = EditorState(committed_text=value, draft=self._parse(value))

    @property
    def committed_text(self) -> str:
        return self.state.committed_text

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def draft(self) -> TimeValue:
        return self.state.draft

    @property
    def draft_text(self) -> str:
        return format_time(self.state.draft, self.config)

    def _parse(self, value: str) -> TimeValue:
        return parse_time(value, self.config, clock=self._clock)

    def _set_draft(self, draft: TimeValue) -> None:
        self.state.draft = draft
        if self.on_draft_changed is not None:
            self.on_draft_changed(draft)

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.draft_text)

    # Dimension model over the current draft

    def dimensions(self) -> list[Dimension]:
        return active_dimensions(self.config)

    def candidates(self, dimension: Dimension | str) -> CandidateList:
        return candidates(dimension, self.state.draft, self.config)

    # Transitions

    def open(self) -> None:
        self.state.is_open = True
        self._set_draft(self._parse(self.state.committed_text))
        self.scroll_into_view()

    def select(self, dimension: Dimension | str, candidate: int | Period | str) -> None:
        if not self.state.is_open:
            _LOGGER.debug("Ignoring %s selection while the picker is closed", dimension)
            return
        try:
            dimension = Dimension(dimension)
            draft = select_candidate(self.state.draft, dimension, candidate)
        except (TypeError, ValueError):
            _LOGGER.debug("Ignoring invalid %s candidate %r", dimension, candidate)
            return
        picked = getattr(draft, dimension.value)
        if dimension not in self.dimensions() or picked not in candidate_values(dimension, self.config):
            _LOGGER.debug("Ignoring %s candidate %r outside the %s wheel", dimension.value, candidate, self.config.time_type)
            return
        self._set_draft(draft)
        self._notify()

    def set_now(self) -> None:
        if not self.state.is_open:
            _LOGGER.debug("Ignoring 'now' while the picker is closed")
            return
        self._set_draft(self._parse(""))
        self._notify()

    def confirm(self) -> None:
        if not self.state.is_open:
            return
        self._notify()
        self.state.is_open = False

    def dismiss(self) -> None:
        self.state.is_open = False

    def external_value_changed(self, value: str) -> None:
        self.state.committed_text = value
        self._set_draft(self._parse(value))

    # Scrolling

    def attach_surface(self, dimension: Dimension | str, surface: ScrollSurface) -> None:
        self._surfaces[Dimension(dimension)] = surface

    def detach_surfaces(self) -> None:
        self._surfaces.clear()

    def scroll_targets(self, viewport_extent: float) -> dict[Dimension, float]:
        return {
            dimension: scroll_offset(self.candidates(dimension).selected_index, self.item_extent, viewport_extent)
            for dimension in self.dimensions()
        }

    def scroll_into_view(self) -> None:
        """Ask each attached surface to centre its selected entry."""
        for dimension in self.dimensions():
            surface = self._surfaces.get(dimension)
            if surface is None:
                continue
            index = self.candidates(dimension).selected_index
            surface.scroll_to_offset(scroll_offset(index, self.item_extent, surface.viewport_extent))
