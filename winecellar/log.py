"""Logging setup for the wine cellar."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once.

    Has no effect on the root handlers when logging is already configured
    (for example by a test runner), but always applies the package level.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("winecellar").setLevel(level.upper())
