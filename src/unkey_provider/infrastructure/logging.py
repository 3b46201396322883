"""Structlog configuration for the provider.

Log output goes to stderr: the plugin host owns stdout. Colored console
output is used in a TTY, JSON otherwise.
"""

import os
import sys
from typing import Any

import structlog

MASKED_VALUE = "***"

SENSITIVE_FIELDS = frozenset({"root_key", "unkey_root_key", "key", "authorization"})


def mask_sensitive_fields(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Replace the values of sensitive fields before rendering."""
    for name in SENSITIVE_FIELDS.intersection(event_dict):
        if event_dict[name] is not None:
            event_dict[name] = MASKED_VALUE
    return event_dict


def configure_logging(level: int = 0, force_json: bool = False) -> None:
    """Configure structlog with appropriate processors.

    Uses colored console output when stderr is a TTY (or FORCE_COLOR is
    set), otherwise JSON output.

    Args:
        level: Minimum log level as a stdlib logging number.
        force_json: Always render JSON, even in a TTY.
    """
    # FORCE_COLOR=1 enables colors even in non-TTY environments
    force_color = os.environ.get("FORCE_COLOR", "").lower() in ("1", "true", "yes")
    is_tty = sys.stderr.isatty()
    use_colors = (force_color or is_tty) and not force_json

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        mask_sensitive_fields,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if use_colors:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
