"""structlog setup for the dirstage command line.

The library modules only call ``structlog.get_logger()`` and leave output
configuration to the host application. Without any configuration structlog
prints to stdout, so each commit or rollback shows up as one line there.
Per-step tracing goes through ``debug()`` instead. The CLI calls
``configure_logging`` so staging events are quiet unless ``--verbose`` is
passed.
"""

import logging
import sys

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Route structlog events to stderr, filtered by verbosity.

    Args:
        verbose: Emit debug events when True; warnings and above otherwise
    """
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
