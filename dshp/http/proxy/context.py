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

from typing import Any, NamedTuple

logger = logging.getLogger(__name__)


class RequestContext(NamedTuple):
    """Log correlation for one request, or for the lifetime of
    the tunnel a CONNECT request spawned.

    Trace lines are only emitted in debug mode.  Errors are
    always logged.  Neither affects control flow."""
    id: int
    debug: bool

    def trace(self, msg: str, *args: Any) -> None:
        if self.debug:
            logger.info('[req %d] ' + msg, self.id, *args, stacklevel=2)

    def error(self, msg: str, *args: Any) -> None:
        logger.warning('[req %d] ' + msg, self.id, *args, stacklevel=2)
