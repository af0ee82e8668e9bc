# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import os
import sys
import time
import signal
import logging
import threading
from typing import Any, List, Optional

from .core.acceptor import Acceptor
from .core.listener import TcpSocketListener
from .common.flag import FlagParser, flags
from .common.utils import bytes_
from .common.config import ProxyConfig
from .common.constants import (
    IS_WINDOWS, DEFAULT_DEBUG, DEFAULT_VERSION, DEFAULT_LOG_FILE,
    DEFAULT_PID_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT,
)


logger = logging.getLogger(__name__)


flags.add_argument(
    '--version',
    '-v',
    action='store_true',
    default=DEFAULT_VERSION,
    help='Prints dshp version.',
)

flags.add_argument(
    '--debug',
    action='store_true',
    default=DEFAULT_DEBUG,
    help='Default: False.  Log a trace line for every step of every request.',
)

flags.add_argument(
    '--log-level',
    type=str,
    default=DEFAULT_LOG_LEVEL,
    help='Valid options: DEBUG, INFO (default), WARNING, ERROR, CRITICAL. '
    'Both upper and lowercase values are allowed. '
    'You may also simply use the leading character e.g. --log-level d',
)

flags.add_argument(
    '--log-file',
    type=str,
    default=DEFAULT_LOG_FILE,
    help='Default: sys.stdout. Log file destination.',
)

flags.add_argument(
    '--log-format',
    type=str,
    default=DEFAULT_LOG_FORMAT,
    help='Log format for Python logger.',
)

flags.add_argument(
    '--pid-file',
    type=str,
    default=DEFAULT_PID_FILE,
    help='Default: None. Save process ID to a file.',
)


class Proxy:
    """Proxy is a context manager to control the dshp server.

    Entering binds the listening socket and starts the
    :class:`~dshp.core.acceptor.Acceptor` event loop thread.  A bad
    ``--listen`` address or a failure to bind raises right away.
    Exiting stops accepting, cancels open connections and tunnels,
    and removes pid/port files.
    """

    def __init__(self, input_args: Optional[List[str]] = None, **opts: Any) -> None:
        self.opts = opts
        self.flags = FlagParser.initialize(input_args, **opts)
        self.listener: Optional[TcpSocketListener] = None
        self.acceptor: Optional[Acceptor] = None

    def __enter__(self) -> 'Proxy':
        self.setup()
        return self

    def __exit__(self, *args: Any) -> None:
        self.shutdown()

    @property
    def config(self) -> ProxyConfig:
        return ProxyConfig.from_flags(self.flags)

    def setup(self) -> None:
        self._write_pid_file()
        self.listener = TcpSocketListener(flags=self.flags)
        self.listener.setup()
        # Override flags.port to match the actual port
        # we are listening upon.  This is necessary to preserve
        # the server port when port 0 is used.
        assert self.listener._port is not None
        self.flags.port = self.listener._port
        self._write_port_file()
        self.acceptor = Acceptor(flags=self.flags, listener=self.listener)
        try:
            self.acceptor.setup()
        except BaseException:
            self.listener.shutdown()
            raise
        logger.info(
            'Listening on http://%s (debug=%s)' %
            (self.config.listen_address, str(self.flags.debug).lower()),
        )
        if threading.current_thread() == threading.main_thread():
            self._register_signals()

    def shutdown(self) -> None:
        if self.acceptor:
            self.acceptor.shutdown()
        if self.listener:
            self.listener.shutdown()
            self._delete_port_file()
        self._delete_pid_file()

    def _write_pid_file(self) -> None:
        if self.flags.pid_file:
            with open(self.flags.pid_file, 'wb') as pid_file:
                pid_file.write(bytes_(os.getpid()))

    def _delete_pid_file(self) -> None:
        if self.flags.pid_file \
                and os.path.exists(self.flags.pid_file):
            os.remove(self.flags.pid_file)

    def _write_port_file(self) -> None:
        if self.flags.port_file:
            with open(self.flags.port_file, 'wb') as port_file:
                port_file.write(bytes_(self.flags.port))
                port_file.write(b'\n')

    def _delete_port_file(self) -> None:
        if self.flags.port_file \
                and os.path.exists(self.flags.port_file):
            os.remove(self.flags.port_file)

    def _register_signals(self) -> None:
        signal.signal(signal.SIGINT, self._handle_exit_signal)
        signal.signal(signal.SIGTERM, self._handle_exit_signal)
        if not IS_WINDOWS:
            signal.signal(signal.SIGHUP, self._handle_exit_signal)
            signal.signal(signal.SIGQUIT, self._handle_exit_signal)

    @staticmethod
    def _handle_exit_signal(signum: int, _frame: Any) -> None:
        logger.debug('Received signal %d' % signum)
        sys.exit(0)


def sleep_loop(p: Optional[Proxy] = None) -> None:
    while True:
        try:
            time.sleep(1)
        except KeyboardInterrupt:
            break


def main(**opts: Any) -> None:
    with Proxy(sys.argv[1:], **opts) as p:
        sleep_loop(p)


def entry_point() -> None:
    main()
