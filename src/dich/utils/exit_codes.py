"""
Exit codes for dich.

The TUI itself always exits with 0; the codes below are used when the
application cannot start.
"""

# Invalid arguments (reported by typer/click)
ERROR_INVALID_ARGS = 2

# Task database could not be opened or migrated
ERROR_PERSISTENCE = 3
