"""Centralized symbols for consistent log output."""


class LogSymbols:
    """Unicode symbols for log messages."""

    SUCCESS = "✓"
    ERROR = "✗"
    ERROR_BOLD = "❌"     # U+274C - Cross mark (bold error for host notifications)
    WARNING = "⚠️"

    BULLET = "•"         # U+2022 - Bullet point for lists
