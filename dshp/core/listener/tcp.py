# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import socket
import logging
import argparse
from typing import Any, Optional

from ...common.flag import flags
from ...common.exception import ListenerBindFailure
from ...common.constants import DEFAULT_BACKLOG, DEFAULT_LISTEN, DEFAULT_PORT_FILE


flags.add_argument(
    '--listen',
    type=str,
    default=DEFAULT_LISTEN,
    help='Default: ' + DEFAULT_LISTEN + '.  Address to listen on as ip:port, '
    'use [ip]:port for IPv6.  Port 0 picks an ephemeral port.',
)

flags.add_argument(
    '--backlog',
    type=int,
    default=DEFAULT_BACKLOG,
    help='Default: 100. Maximum number of pending connections to proxy server.',
)

flags.add_argument(
    '--port-file',
    type=str,
    default=DEFAULT_PORT_FILE,
    help='Default: None. Save server port number. Useful when listening on port 0.',
)

logger = logging.getLogger(__name__)


class TcpSocketListener:
    """Binds the proxy's listening socket.

    Binding happens synchronously in ``setup`` so that address problems
    surface at startup, before any event loop runs.  The bound socket
    is later handed over to :func:`asyncio.start_server`."""

    def __init__(self, flags: argparse.Namespace, port: Optional[int] = None) -> None:
        self.flags = flags
        # Port if passed will be used, otherwise
        # flag port value will be used.
        self.port = port
        # Set after binding to a port.
        #
        # Stored here separately for ephemeral port discovery.
        self._port: Optional[int] = None
        self._socket: Optional[socket.socket] = None

    def __enter__(self) -> 'TcpSocketListener':
        self.setup()
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()

    @property
    def sock(self) -> socket.socket:
        assert self._socket, 'Listener not setup'
        return self._socket

    def fileno(self) -> Optional[int]:
        if not self._socket:
            return None
        return self._socket.fileno()

    def setup(self) -> None:
        self._socket = self.listen()

    def shutdown(self) -> None:
        assert self._socket
        self._socket.close()

    def listen(self) -> socket.socket:
        sock = socket.socket(
            socket.AF_INET6 if self.flags.hostname.version == 6 else socket.AF_INET,
            socket.SOCK_STREAM,
        )
        port = self.port if self.port is not None else self.flags.port
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
            sock.bind((str(self.flags.hostname), port))
            sock.listen(self.flags.backlog)
        except OSError as e:
            sock.close()
            raise ListenerBindFailure(
                str(self.flags.hostname), port, e.strerror or str(e),
            ) from e
        sock.setblocking(False)
        self._port = sock.getsockname()[1]
        logger.debug(
            'Bound listener on %s:%s' %
            (self.flags.hostname, self._port),
        )
        return sock
