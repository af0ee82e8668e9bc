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
from .connection import TcpConnection, TcpConnectionUninitializedException
from ...common.types import HostPort


class TcpServerConnection(TcpConnection):
    """A buffered upstream server connection object."""

    def __init__(self, host: str, port: int) -> None:
        super().__init__(tcpConnectionTypes.SERVER)
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None
        # IPv6 literals arrive bracketed from request targets
        self.addr: HostPort = (host.strip('[]'), port)
        self.closed = True

    @property
    def reader(self) -> asyncio.StreamReader:
        if self._reader is None:
            raise TcpConnectionUninitializedException()
        return self._reader

    @property
    def writer(self) -> asyncio.StreamWriter:
        if self._writer is None:
            raise TcpConnectionUninitializedException()
        return self._writer

    async def connect(self, timeout: float = 0) -> None:
        """Opens the connection.

        Raises :exc:`OSError` for resolution or connection failures
        and :exc:`asyncio.TimeoutError` when ``timeout`` seconds pass
        first.  A ``timeout`` of ``0`` waits indefinitely."""
        assert self._writer is None
        opening = asyncio.open_connection(self.addr[0], self.addr[1])
        if timeout > 0:
            self._reader, self._writer = await asyncio.wait_for(opening, timeout)
        else:
            self._reader, self._writer = await opening
        self.closed = False
