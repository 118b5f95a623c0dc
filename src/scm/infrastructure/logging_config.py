"""Logging setup for the ``scm`` command-line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str, logfile: str | None = None) -> None:
    """Send records to stderr, and to ``logfile`` when one is given.

    A no-op once the root logger has handlers, so repeated CLI runs in
    one interpreter do not stack them. Unknown level names mean WARNING.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
    )
