# salary_estimator/log.py
"""Console logging for the scripts; library modules only call logging.getLogger."""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def setup_logging(level: Optional[str] = None) -> int:
    """
    Attach a stdout handler to the root logger unless one is already there.
    Level comes from the argument, then LOG_LEVEL, then INFO. Returns the level used.
    """
    name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root = logging.getLogger()
    root.setLevel(resolved)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)

    # requests' connection pool logs every request at DEBUG
    logging.getLogger("urllib3").setLevel(max(resolved, logging.WARNING))
    return resolved
