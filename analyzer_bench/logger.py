"""Logger handles passed explicitly to the harness and analyzers."""

import logging

LOGGER_NAME = "analyzer_bench"


def create_logger(*, enabled: bool, name: str = LOGGER_NAME) -> logging.Logger:
    """Create the logger handle for one batch run.

    A disabled logger drops every record and does not propagate to the root
    handlers, so analyzers stay silent during batch runs.
    """
    log = logging.getLogger(name)
    log.disabled = not enabled
    log.propagate = enabled
    if not enabled and not any(
        isinstance(handler, logging.NullHandler) for handler in log.handlers
    ):
        log.addHandler(logging.NullHandler())
    return log
