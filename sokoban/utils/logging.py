"""Logging configuration for the server and the headless CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Handler:
    """Point the root logger at *stream* (stdout by default).

    The CLI passes ``sys.stderr`` so that stdout carries only the rendered
    board. Returns the installed handler.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    return handler
