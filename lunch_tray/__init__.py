"""Lunch Tray: a Textual wizard for building a cafeteria tray order."""
