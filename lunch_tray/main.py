"""Entry point for the lunch-tray Textual app."""

from __future__ import annotations

from lunch_tray.tray_app import LunchTrayApp


def main() -> None:
    """Run the Textual application."""
    LunchTrayApp().run()


if __name__ == "__main__":
    main()
