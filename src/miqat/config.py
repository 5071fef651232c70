from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib

from .models import FormatConfig, FormatOptionError


def _default_config_root() -> Path:
    return Path.home() / ".config" / "miqat"


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("\"", "\\\"").replace("\n", "\\n")
    return f"\"{escaped}\""


@dataclass(slots=True)
class PickerSettings:
    time_type: str = "24h"
    format: str = "HH:mm"
    placeholder: str = "Select Time"
    value: str = ""
    item_extent: int = 1

    def format_config(self) -> FormatConfig:
        return FormatConfig.from_options(self.time_type, self.format)


@dataclass(slots=True)
class MiqatConfig:
    picker: PickerSettings = field(default_factory=PickerSettings)

    @classmethod
    def default(cls) -> "MiqatConfig":
        return cls(picker=PickerSettings())

    def to_dict(self) -> dict:
        return {
            "picker": {
                "time_type": self.picker.time_type,
                "format": self.picker.format,
                "placeholder": self.picker.placeholder,
                "value": self.picker.value,
                "item_extent": self.picker.item_extent,
            },
        }


class ConfigManager:
    """Simple TOML configuration loader."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or (_default_config_root() / "config.toml")
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self._errors: list[str] = []

    def errors(self) -> list[str]:
        return list(self._errors)

    def load(self) -> MiqatConfig:
        self._errors.clear()
        if not self.config_path.exists():
            config = MiqatConfig.default()
            self._write(config)
            return config

        try:
            with self.config_path.open("rb") as handle:
                raw = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            self._errors.append(f"Invalid TOML in {self.config_path}: {exc}")
            return MiqatConfig.default()

        picker_cfg = raw.get("picker", {})
        defaults = PickerSettings()

        def _int_or_default(value: object, default: int) -> int:
            try:
                result = int(value)  # type: ignore[arg-type]
            except (TypeError, ValueError):
                self._errors.append(f"Invalid picker.item_extent: {value!r}")
                return default
            if result < 1:
                self._errors.append(f"Invalid picker.item_extent: {value!r}")
                return default
            return result

        picker = PickerSettings(
            time_type=str(picker_cfg.get("time_type", defaults.time_type)),
            format=str(picker_cfg.get("format", defaults.format)),
            placeholder=str(picker_cfg.get("placeholder", defaults.placeholder)),
            value=str(picker_cfg.get("value", defaults.value)),
            item_extent=_int_or_default(picker_cfg.get("item_extent", defaults.item_extent), defaults.item_extent),
        )
        try:
            picker.format_config()
        except FormatOptionError as exc:
            self._errors.append(f"Invalid picker options in config: {exc}")
            picker.time_type = defaults.time_type
            picker.format = defaults.format

        return MiqatConfig(picker=picker)

    def _write(self, config: MiqatConfig) -> None:
        data = config.to_dict()
        lines = [
            "[picker]",
            f"time_type = {_quote(data['picker']['time_type'])}",
            f"format = {_quote(data['picker']['format'])}",
            f"placeholder = {_quote(data['picker']['placeholder'])}",
            f"value = {_quote(data['picker']['value'])}",
            f"item_extent = {data['picker']['item_extent']}",
        ]
        self.config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    def save(self, config: MiqatConfig) -> None:
        self._write(config)
