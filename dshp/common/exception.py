# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    Startup failures.  Unlike per-request errors these are fatal.
"""


class InvalidListenAddress(ValueError):
    """Raised when ``--listen`` is not a valid ``ip:port`` pair."""

    def __init__(self, listen: str, reason: str) -> None:
        self.listen = listen
        self.reason = reason
        super().__init__('Invalid listen address %r: %s' % (listen, reason))


class ListenerBindFailure(OSError):
    """Raised when the listening socket cannot be bound."""

    def __init__(self, hostname: str, port: int, reason: str) -> None:
        self.hostname = hostname
        self.port = port
        self.reason = reason
        super().__init__('Unable to listen on %s:%d: %s' % (hostname, port, reason))
