from __future__ import annotations

from textual.app import ComposeResult  # type: ignore[import]
from textual.binding import Binding  # type: ignore[import]
from textual.containers import Horizontal, Vertical  # type: ignore[import]
from textual.screen import ModalScreen  # type: ignore[import]
from textual.widgets import Button, ListView, Static  # type: ignore[import]

from ..editor import TimeEditor
from ..models import Dimension, TimeValue
from .widgets import WheelColumn, WheelItem


class TimePickerScreen(ModalScreen[None]):
    """Modal wheel picker. Picks are reported immediately; Esc leaves without confirming."""

    DEFAULT_CSS = """
    TimePickerScreen {
        align: center middle;
    }

    #time-picker-dialog {
        width: auto;
        height: auto;
        border: round $accent;
        background: $boost;
        padding: 1 2;
    }

    #time-wheels {
        height: 12;
        width: auto;
    }

    .wheel {
        width: 8;
        height: 100%;
        border-right: solid $panel;
    }

    .wheel > ListItem.picked {
        background: $primary;
        color: $text;
        text-style: bold;
    }

    #time-actions {
        height: auto;
        width: 100%;
        margin-top: 1;
    }

    .dialog-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .dialog-help {
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
        Binding("n", "now", "Now"),
        Binding("c", "confirm", "Confirm"),
    ]

    def __init__(self, editor: TimeEditor) -> None:
        super().__init__()
        self.editor = editor
        self.wheels: dict[Dimension, WheelColumn] = {}

    def compose(self) -> ComposeResult:
        self.wheels.clear()
        for dimension in self.editor.dimensions():
            self.wheels[dimension] = WheelColumn(self.editor.candidates(dimension))
        title = Static("Select Time", classes="dialog-title")
        actions = Horizontal(
            Button("Now", id="time-now"),
            Button("Confirm", id="time-confirm", variant="primary"),
            id="time-actions",
        )
        help_text = Static("Enter = Pick • n = Now • c = Confirm • Esc = Cancel", classes="dialog-help")
        yield Vertical(
            title,
            Horizontal(*self.wheels.values(), id="time-wheels"),
            actions,
            help_text,
            id="time-picker-dialog",
        )

    def on_mount(self) -> None:
        for dimension, wheel in self.wheels.items():
            self.editor.attach_surface(dimension, wheel)
        self.editor.on_draft_changed = self._draft_changed
        # Column heights are only known once the dialog has been laid out.
        self.call_after_refresh(self.editor.scroll_into_view)

    def on_unmount(self) -> None:
        self.editor.detach_surfaces()
        if self.editor.is_open:
            self.editor.dismiss()
        self.editor.on_draft_changed = None

    def _draft_changed(self, draft: TimeValue) -> None:
        for dimension, wheel in self.wheels.items():
            wheel.mark_picked(self.editor.candidates(dimension).selected_index)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if not isinstance(event.list_view, WheelColumn) or not isinstance(event.item, WheelItem):
            return
        self.editor.select(event.list_view.dimension, event.item.candidate)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "time-now":
            self.action_now()
        elif event.button.id == "time-confirm":
            self.action_confirm()

    def action_now(self) -> None:
        self.editor.set_now()

    def action_confirm(self) -> None:
        self.editor.confirm()
        self.dismiss(None)

    def action_cancel(self) -> None:
        self.editor.dismiss()
        self.dismiss(None)
