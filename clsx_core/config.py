"""
Configuration objects for clsx
"""

import logging
from dataclasses import dataclass

from clsx_core.constants import CONDITION_MARKER, DEFAULT_LOG_LEVEL, ITEM_DELIMITER


@dataclass(frozen=True)
class ClsxConfig:
    """
    Settings shared by the library and the command line front end.
    """
    condition_marker: str = CONDITION_MARKER
    delimiter: str = ITEM_DELIMITER
    log_level: str = DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging at the given level name."""
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Invalid log level: {level!r}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logging.getLogger().setLevel(numeric)
