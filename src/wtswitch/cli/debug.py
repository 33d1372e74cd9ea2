"""Debug logging setup."""

import logging
import os

DEBUG_ENV_VAR = "WTS_DEBUG"


def configure_logging(debug: bool) -> None:
    """Enable debug logging to stderr when requested by flag or WTS_DEBUG."""
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
