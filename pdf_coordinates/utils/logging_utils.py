"""
Status reporting for the CLI.

Each helper writes the technical message to the log handlers configured by
main.setup_logging and passes a short, marked line to a status callback.
The CLI's callback prints to stderr, keeping stdout for results.
"""

import logging
from typing import Callable, Mapping, Optional

StatusFn = Optional[Callable[[str], None]]

RULE = "=" * 60

MARKERS = {
    logging.INFO: "✅",
    logging.WARNING: "⚠",
    logging.ERROR: "❌",
}


def _notify(status_fn: StatusFn, line: str):
    if status_fn is None:
        return
    try:
        status_fn(line)
    except Exception as e:
        logging.warning(f"Status update failed: {e}")


def log_and_status(status_fn: StatusFn, msg: str, level: int = logging.INFO,
                   ui_msg: Optional[str] = None):
    """Log msg at level and show ui_msg (or msg) through status_fn."""
    logging.log(level, msg)
    _notify(status_fn, msg if ui_msg is None else ui_msg)


def _log_marked(status_fn: StatusFn, level: int, msg: str, details: Optional[str]):
    tech_msg = f"{logging.getLevelName(level)}: {msg}"
    if details:
        tech_msg += f" | {details}"
    log_and_status(status_fn, tech_msg, level=level, ui_msg=f"{MARKERS[level]} {msg}")


def log_section_header(status_fn: StatusFn, title: str):
    """Frame a title between rules."""
    header = f"{RULE}\n{title}\n{RULE}"
    log_and_status(status_fn, header)


def log_success(status_fn: StatusFn, msg: str, details: Optional[str] = None):
    _log_marked(status_fn, logging.INFO, msg, details)


def log_warning(status_fn: StatusFn, msg: str, details: Optional[str] = None):
    _log_marked(status_fn, logging.WARNING, msg, details)


def log_error(status_fn: StatusFn, msg: str, details: Optional[str] = None,
              exc: Optional[BaseException] = None):
    """
    Report an error.

    Args:
        status_fn: Status callback
        msg: User-facing message
        details: Extra context for the log only
        exc: Exception whose traceback goes to the log only
    """
    if exc is not None:
        details = f"{details} | " if details else ""
        details += f"{type(exc).__name__}: {exc}"
        logging.error(f"ERROR: {msg} | {details}", exc_info=exc)
        _notify(status_fn, f"{MARKERS[logging.ERROR]} {msg}")
        return
    _log_marked(status_fn, logging.ERROR, msg, details)


def log_summary(status_fn: StatusFn, title: str, stats: Mapping[str, object]):
    """Report a title followed by one indented `key: value` line per stat."""
    lines = [title] + [f"  {key}: {value}" for key, value in stats.items()]
    log_and_status(status_fn, "\n".join(lines))
