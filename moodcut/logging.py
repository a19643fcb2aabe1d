"""Centralized logging configuration for moodcut."""

import logging


def configure_logging(verbose: bool = False) -> None:
    """Enable DEBUG output when ``verbose``, otherwise WARNING and above."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
