from __future__ import annotations

# Process exit codes shared by all subcommands.
OK = 0
INVALID = 1  # props rejected (or warnings under --strict)
USER_ERR = 2  # bad usage, unknown field, unreadable props file
INTERNAL = 3

__all__ = ["INTERNAL", "INVALID", "OK", "USER_ERR"]
