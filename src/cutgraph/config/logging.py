"""structlog setup for the cutgraph CLI.

Both structlog loggers and the plain ``logging.getLogger(__name__)``
loggers used by the store and the analysis passes end up in one stderr
handler, rendered either for a terminal or as JSON lines (``--log-json``).
Only the ``cutgraph`` logger tree drops to DEBUG under ``--verbose``.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "cutgraph"

# Libraries whose DEBUG chatter is never useful on the command line.
_NOISY_LOGGERS = ("networkx", "asyncio")


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through a single stderr handler.

    Safe to call more than once; the root handler is replaced, not stacked.

    Args:
        verbose: DEBUG for the ``cutgraph`` loggers instead of WARNING.
        log_json: One JSON object per line instead of console output.
    """
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
