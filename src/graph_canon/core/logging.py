"""Structured logging for graph-canon.

Every module logger is a structlog BoundLogger wrapped around a stdlib
logger under the ``graph_canon`` namespace. Until the host application (or
test suite) configures logging, stdlib levels and a NullHandler on the
namespace keep canonicalization silent: equals() and the assertion helpers
never write to stdout or stderr on their own.

configure_logging() is opt-in. It renders both structlog events and plain
stdlib records through structlog's ProcessorFormatter, as JSON or console
lines, so refinement and tie-break diagnostics can be inspected:

    configure_logging(level="DEBUG")
    canonicalize(graph)
    # ... [debug] tie_break_search candidates=6 groups=1 largest_tie=3 logger=graph_canon.core.ordering
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import ProcessorFormatter

LIBRARY_LOGGER = "graph_canon"

# Library convention: no output (not even stdlib's last-resort stderr handler)
# unless the application installs handlers of its own
logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Drop ProcessorFormatter bookkeeping (_record, _from_structlog) from output."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
) -> None:
    """Configure structlog and stdlib logging to emit graph-canon diagnostics.

    Installs a single stdout handler on the root logger. Canonicalization
    emits DEBUG events (refinement_converged, tie_break_search,
    graph_canonicalized) and WARNING events when a budget runs out
    (refinement_budget_exhausted, permutation_budget_exhausted).

    Args:
        json_output: If True, output JSON. If False, human-readable.
        level: Log level (DEBUG, INFO, WARNING, ERROR).
    """
    log_level = getattr(logging, level.upper())

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        final_processors: list[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=[
            # Skip rendering events stdlib would discard anyway
            structlog.stdlib.filter_by_level,
            *shared_processors,
            ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Module loggers are created at import time and must pick up later reconfiguration
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            foreign_pre_chain=shared_processors,
        )
    )

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger backed by the stdlib logger ``name``.

    The stdlib logger decides whether an event is emitted, so an unconfigured
    process (root level WARNING, no handlers) stays silent.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Bound structlog logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger
