# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
import asyncio
from typing import Optional

from .types import tcpConnectionTypes
from .connection import TcpConnection
from ...common.types import HostPort


class TcpClientConnection(TcpConnection):
    """A buffered client connection object."""

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        addr: Optional[HostPort] = None,
    ) -> None:
        super().__init__(tcpConnectionTypes.CLIENT)
        self._reader = reader
        self._writer = writer
        if addr is None:
            peer = writer.get_extra_info('peername')
            addr = (peer[0], peer[1]) if peer else None
        self.addr: Optional[HostPort] = addr

    @property
    def address(self) -> str:
        return 'unknown' if not self.addr else '{0}:{1}'.format(self.addr[0], self.addr[1])

    @property
    def reader(self) -> asyncio.StreamReader:
        return self._reader

    @property
    def writer(self) -> asyncio.StreamWriter:
        return self._writer
