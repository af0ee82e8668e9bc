# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import logging
from typing import Any, Dict, Optional

from .constants import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT


SINGLE_CHAR_TO_LEVEL = {
    'D': 'DEBUG',
    'I': 'INFO',
    'W': 'WARNING',
    'E': 'ERROR',
    'C': 'CRITICAL',
}


def single_char_to_level(char: str) -> Any:
    """Resolves ``debug``, ``D``, ``Info`` etc into a :mod:`logging` level.

    Raises :exc:`ValueError` for anything that does not start with
    one of the known level characters."""
    if not char or char.upper()[0] not in SINGLE_CHAR_TO_LEVEL:
        raise ValueError('Invalid log level %r' % char)
    return getattr(logging, SINGLE_CHAR_TO_LEVEL[char.upper()[0]])


class Logger:
    """Common logging utilities and setup."""

    @staticmethod
    def setup(
            log_file: Optional[str] = DEFAULT_LOG_FILE,
            log_level: str = DEFAULT_LOG_LEVEL,
            log_format: str = DEFAULT_LOG_FORMAT,
    ) -> None:
        level = single_char_to_level(log_level)
        kwargs: Dict[str, Any] = {'level': level, 'format': log_format}
        if log_file:    # pragma: no cover
            kwargs.update(filename=log_file, filemode='a')
        logging.basicConfig(**kwargs)
        # asyncio is chatty about slow callbacks and unclosed transports
        # in debug mode, keep it quiet unless we are debugging ourselves.
        if level > logging.DEBUG:
            logging.getLogger('asyncio').setLevel(logging.WARNING)
