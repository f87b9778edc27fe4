"""Textual user interface for dich."""
