"""
Observability: structured logging and context management.

Provides:
- Contextual logging with source tag and row number
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    clear_row_context,
    configure_logging,
    make_source_tag,
    set_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "clear_row_context",
    "make_source_tag",
]
