"""
Logging setup with contextvars-based metadata injection.

- Adds source tag and row number into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
"""

import contextvars
import hashlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_source_tag = contextvars.ContextVar("source_tag", default="-")
cv_row = contextvars.ContextVar("row", default="-")


def make_source_tag(source: str, length: int = 8) -> str:
    """
    Stable short tag derived from the input source name (file path or "argv").
    Uses BLAKE2s for collision resistance.
    """
    h = hashlib.blake2s(source.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.src = cv_source_tag.get() or "-"
        record.row = cv_row.get() or "-"
        return True


def set_log_context(*, source: str | None = None, row: int | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if source is not None:
        cv_source_tag.set(make_source_tag(str(source)))

    if row is not None:
        cv_row.set(str(int(row)))


def clear_row_context() -> None:
    """Reset row context to default (keep source info)."""
    cv_row.set("-")


CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] s=%(src)s row=%(row)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | s=%(src)s row=%(row)s | %(message)s"


def _attach(root: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(ContextInjectFilter())
    root.addHandler(handler)


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5_000_000,  # 5MB
    backup_count: int = 3,
) -> None:
    """
    Configure root logging for a decoding run.

    Console lines go to stderr so stdout stays free for decoded codes.
    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Optional rotating log file (parent directories are created)
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of rotated files to keep
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # handlers enforce levels

    _attach(root, logging.StreamHandler(), console_level, logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(
            root,
            RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"),
            file_level,
            logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"),
        )

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        log_file,
    )
