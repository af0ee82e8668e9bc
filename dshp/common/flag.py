# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import sys
import socket
import argparse
import ipaddress

from typing import Optional, List, Any, Tuple, cast

from .types import IpAddress
from .logger import Logger
from .exception import InvalidListenAddress

from .version import __version__

__homepage__ = 'https://github.com/dshp/dshp'


def parse_listen_address(listen: str) -> Tuple[IpAddress, int]:
    """Parses ``ip:port`` or ``[ipv6]:port`` into an address and port.

    Hostnames are not accepted, the listener binds to a literal
    interface address.  Port ``0`` asks the kernel for an ephemeral port."""
    host, sep, port = listen.rpartition(':')
    if not sep or not host:
        raise InvalidListenAddress(listen, 'expected ip:port')
    if host.startswith('[') and host.endswith(']'):
        host = host[1:-1]
    try:
        hostname = ipaddress.ip_address(host)
    except ValueError as e:
        raise InvalidListenAddress(listen, str(e)) from e
    try:
        port_num = int(port)
    except ValueError as e:
        raise InvalidListenAddress(listen, 'port is not a number') from e
    if not 0 <= port_num <= 65535:
        raise InvalidListenAddress(listen, 'port out of range')
    return hostname, port_num


class FlagParser:
    """Wrapper around argparse module.

    Import `flag.flags` and use `add_argument` API
    to define custom flags within respective Python files.

    Best Practice:
    1. Define flags at the top of your class files.
    2. DO NOT add flags within your class `__init__` method OR
       within class methods.
    """

    def __init__(self) -> None:
        self.args: Optional[argparse.Namespace] = None
        self.actions: List[str] = []
        self.parser = argparse.ArgumentParser(
            prog='dshp',
            description='dshp v%s' % __version__,
            epilog='dshp not working? Report at: %s/issues/new' % __homepage__,
        )

    def add_argument(self, *args: Any, **kwargs: Any) -> argparse.Action:
        """Register a flag."""
        action = self.parser.add_argument(*args, **kwargs)
        self.actions.append(action.dest)
        return action

    def parse_args(
            self, input_args: Optional[List[str]],
    ) -> argparse.Namespace:
        """Parse flags from input arguments."""
        self.args = self.parser.parse_args(input_args)
        return self.args

    @staticmethod
    def initialize(
        input_args: Optional[List[str]] = None,
        **opts: Any,
    ) -> argparse.Namespace:
        """Parses ``input_args`` and resolves final flag values.

        Keyword ``opts`` take precedence over parsed flags, which lets
        embedders and tests override any value without building
        a command line."""
        if input_args is None:
            input_args = []

        # Parse flags
        args = flags.parse_args(input_args)

        # Print version and exit
        if args.version:
            print(__version__)
            sys.exit(0)

        # Setup logging module
        Logger.setup(args.log_file, args.log_level, args.log_format)

        hostname, port = parse_listen_address(
            cast(str, opts.get('listen', args.listen)),
        )
        args.hostname = cast(IpAddress, opts.get('hostname', hostname))
        args.port = cast(int, opts.get('port', port))
        args.family = socket.AF_INET6 if args.hostname.version == 6 else socket.AF_INET
        args.backlog = cast(int, opts.get('backlog', args.backlog))
        args.username = cast(str, opts.get('username', args.username))
        args.password = cast(str, opts.get('password', args.password))
        args.debug = cast(bool, opts.get('debug', args.debug))
        args.timeout = cast(float, opts.get('timeout', args.timeout))
        args.pid_file = cast(
            Optional[str], opts.get(
                'pid_file', args.pid_file,
            ),
        )
        args.port_file = cast(
            Optional[str], opts.get(
                'port_file', args.port_file,
            ),
        )
        return args


flags = FlagParser()
