from __future__ import annotations

from textual.app import App, ComposeResult  # type: ignore[import]
from textual.binding import Binding  # type: ignore[import]
from textual.containers import Vertical  # type: ignore[import]
from textual.widgets import Footer, Header, Static  # type: ignore[import]

from ..config import ConfigManager, MiqatConfig
from .widgets import TimePickerField


class ChangeLog(Static):
    def show(self, value: str, count: int) -> None:
        self.update(f"Value: {value or 'none'} • Changes: {count}")


class MiqatApp(App):
    CSS = """
    Screen {
        background: $surface;
    }

    #picker-panel {
        border: round $accent;
        padding: 1 2;
        background: $boost;
        height: auto;
        width: auto;
    }

    .panel-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .panel-help {
        color: $text-muted;
        margin-top: 1;
    }
    """
    TITLE = "Miqat Time Picker"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("s", "save_value", "Save Value"),
    ]

    def __init__(self, config_manager: ConfigManager | None = None, config: MiqatConfig | None = None) -> None:
        super().__init__()
        self.config_manager = config_manager
        if config is None:
            self.config_manager = self.config_manager or ConfigManager()
            config = self.config_manager.load()
        self.config = config
        settings = self.config.picker
        self.picker = TimePickerField(
            settings.value,
            time_type=settings.time_type,
            format=settings.format,
            placeholder=settings.placeholder,
            item_extent=settings.item_extent,
            id="time-picker",
        )
        self.change_log = ChangeLog(id="change-log")
        self.change_count = 0

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static(f"Time ({self.config.picker.time_type}, {self.config.picker.format})", classes="panel-title"),
            self.picker,
            self.change_log,
            Static("Enter = open picker • s = save value • q = quit", classes="panel-help"),
            id="picker-panel",
        )
        yield Footer()

    def on_mount(self) -> None:
        self.change_log.show(self.picker.value, self.change_count)
        self.picker.focus()
        if self.config_manager is not None:
            for message in self.config_manager.errors():
                self.notify(message, severity="error")

    def on_time_picker_field_changed(self, event: TimePickerField.Changed) -> None:
        self.change_count += 1
        self.change_log.show(event.value, self.change_count)

    def action_save_value(self) -> None:
        if self.config_manager is None:
            return
        self.config.picker.value = self.picker.value
        self.config_manager.save(self.config)
        self.notify(f"Saved {self.picker.value or 'empty value'}")
