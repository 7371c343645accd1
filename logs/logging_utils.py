"""Logging configuration helpers for the CLI and tests."""

import logging

_FORMAT = "%(asctime)s %(levelname).1s %(name)s: %(message)s"


def level_for(
    verbosity: int,
) -> int:
    """Map a count of ``-v`` flags to a logging level."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    verbosity: int,
    log_file: str | None = None,
) -> None:
    """Configure logging based on verbosity and optional log file.

    Parameters
    ----------
    verbosity : int
        Count of ``-v`` flags; higher means more verbose.
    log_file : str or None
        Path to a log file that receives every record at the chosen level,
        or ``None`` to log to stderr only.

    Raises
    ------
    OSError
        If ``log_file`` cannot be opened. Logging is left unchanged.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(
            logging.FileHandler(
                log_file,
                encoding="utf-8",
            )
        )
    # Reset prior basicConfig.
    # Tests or multiple CLI invocations may have configured logging already.
    logging.basicConfig(
        level=level_for(verbosity),
        format=_FORMAT,
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )
