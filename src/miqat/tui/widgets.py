from __future__ import annotations

from typing import Callable

from textual.binding import Binding  # type: ignore[import]
from textual.message import Message  # type: ignore[import]
from textual.reactive import reactive  # type: ignore[import]
from textual.widgets import Label, ListItem, ListView, Static  # type: ignore[import]

from ..editor import TimeEditor
from ..models import CandidateList, FormatConfig, Period
from ..timeutils import Clock


def display_text(value: str, placeholder: str) -> str:
    if value:
        return value
    return f"[dim]{placeholder}[/dim]"


class WheelItem(ListItem):
    def __init__(self, candidate: int | Period, label: str, picked: bool = False) -> None:
        super().__init__(Label(label), classes="picked" if picked else None)
        self.candidate = candidate


class WheelColumn(ListView):
    """One scrollable column of candidates; acts as the editor's scroll surface."""

    BINDINGS = [
        Binding("j", "cursor_down", "Down", show=False),
        Binding("k", "cursor_up", "Up", show=False),
    ]

    def __init__(self, candidates: CandidateList) -> None:
        items = [
            WheelItem(candidate, label, picked=position == candidates.selected_index)
            for position, (candidate, label) in enumerate(zip(candidates.values, candidates.labels))
        ]
        initial = candidates.selected_index if candidates.selected is not None else 0
        super().__init__(*items, initial_index=initial, id=f"wheel-{candidates.dimension.value}", classes="wheel")
        self.dimension = candidates.dimension

    @property
    def viewport_extent(self) -> float:
        return self.size.height

    def scroll_to_offset(self, offset: float) -> None:
        self.scroll_to(y=max(0.0, offset), animate=True)

    def mark_picked(self, index: int) -> None:
        for position, item in enumerate(self.query(WheelItem)):
            item.set_class(position == index, "picked")


class TimePickerField(Static, can_focus=True):
    """Read-only time display; Enter or a click opens the wheel picker."""

    DEFAULT_CSS = """
    TimePickerField {
        border: round $accent;
        padding: 0 1;
        width: 24;
        height: 3;
    }

    TimePickerField:focus {
        border: round $success;
    }

    TimePickerField:disabled {
        opacity: 0.5;
    }
    """

    BINDINGS = [
        Binding("enter", "open_picker", "Pick Time"),
        Binding("space", "open_picker", "Pick Time", show=False),
    ]

    value: reactive[str] = reactive("", init=False)

    class Changed(Message):
        """Posted on every pick and on confirm with the new text."""

        def __init__(self, picker: "TimePickerField", value: str) -> None:
            super().__init__()
            self.picker = picker
            self.value = value

        @property
        def control(self) -> "TimePickerField":
            return self.picker

    def __init__(
        self,
        value: str = "",
        *,
        time_type: str = "24h",
        format: str = "HH:mm",
        placeholder: str = "Select Time",
        item_extent: int = 1,
        clock: Clock | None = None,
        on_change: Callable[[str], None] | None = None,
        disabled: bool = False,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(display_text(value, placeholder), id=id, classes=classes, disabled=disabled)
        self.placeholder = placeholder
        self._on_change = on_change
        self.editor = TimeEditor(
            value,
            config=FormatConfig.from_options(time_type, format),
            on_change=self._editor_changed,
            clock=clock,
            item_extent=item_extent,
        )
        self.set_reactive(TimePickerField.value, value)

    def watch_value(self, value: str) -> None:
        self.editor.external_value_changed(value)
        self.update(display_text(value, self.placeholder))

    def _editor_changed(self, text: str) -> None:
        self.value = text
        if self._on_change is not None:
            self._on_change(text)
        self.post_message(self.Changed(self, text))

    def on_click(self) -> None:
        self.action_open_picker()

    def action_open_picker(self) -> None:
        if self.disabled or self.editor.is_open:
            return
        from .screens import TimePickerScreen

        self.editor.open()
        self.app.push_screen(TimePickerScreen(self.editor))
