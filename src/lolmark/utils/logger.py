"""Logger lookup for lolmark modules.

Every module logs under the ``lolmark`` namespace so that callers can
tune the compiler's output with one logger. The library itself never
installs handlers; ``lolmark.cli`` sets them up from ``-v`` flags.

What gets logged:
    - DEBUG: compile start and finish, scope frames, ignored trailing input
    - INFO: browser launches from the CLI
    - WARNING: constructs that are dropped, such as a title outside the head

Example:
    >>> from lolmark.utils.logger import get_logger
    >>> logger = get_logger("parsing.blocks")
    >>> logger.name
    'lolmark.parsing.blocks'
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``lolmark`` namespace.

    Module names already under the package (``__name__`` in lolmark code)
    are used as is; anything else gets the ``lolmark.`` prefix.
    """
    if not (name == "lolmark" or name.startswith("lolmark.")):
        name = f"lolmark.{name}"
    return logging.getLogger(name)
