from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging(verbose: bool = False) -> None:
    """Install the stderr handler used by the CLI. Safe to call repeatedly."""
    global _configured
    root = logging.getLogger("uxml_bindgen")
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    if _configured:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
