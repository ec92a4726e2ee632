"""Rendering layers: Textual TUI and plain Rich output."""
