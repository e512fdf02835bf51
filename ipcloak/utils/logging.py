# ipcloak/utils/logging.py

from __future__ import annotations
import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ROOT = "ipcloak"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger living under the ``ipcloak`` namespace.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """
    Send ipcloak logs to stderr. Stdout is reserved for the cloaked forms.
    """
    root = logging.getLogger(_ROOT)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Re-configuring (e.g. repeated CLI runs in one process) replaces the handler
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)
    root.propagate = False
