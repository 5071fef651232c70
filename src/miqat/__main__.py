from __future__ import annotations

from .tui.app import MiqatApp


def main() -> None:
    MiqatApp().run()


if __name__ == "__main__":  # pragma: no cover
    main()
