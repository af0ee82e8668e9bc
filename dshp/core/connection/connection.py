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
import logging

from abc import ABC, abstractmethod
from typing import Optional, List

from .types import tcpConnectionTypes
from ...common.constants import DEFAULT_BUFFER_SIZE

logger = logging.getLogger(__name__)


class TcpConnectionUninitializedException(Exception):
    pass


class TcpConnection(ABC):
    """TCP server/client connection abstraction over asyncio streams.

    Main motivation of this class is to provide a buffer management
    when reading and writing into the stream.  Data is first ``queue``-d
    and then written out with ``flush``, which also waits for the
    transport to drain.

    Implement the ``reader`` and ``writer`` properties to return
    the underlying asyncio stream pair.
    """

    def __init__(self, tag: int) -> None:
        self.tag: str = 'server' if tag == tcpConnectionTypes.SERVER else 'client'
        self.buffer: List[memoryview] = []
        self.closed: bool = False

    @property
    @abstractmethod
    def reader(self) -> asyncio.StreamReader:
        """Must return the stream reader to use in this class."""
        raise TcpConnectionUninitializedException()     # pragma: no cover

    @property
    @abstractmethod
    def writer(self) -> asyncio.StreamWriter:
        """Must return the stream writer to use in this class."""
        raise TcpConnectionUninitializedException()     # pragma: no cover

    async def recv(
            self, buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> Optional[memoryview]:
        """Returns None once peer has closed its side.

        Users must handle ConnectionError exceptions"""
        data: bytes = await self.reader.read(buffer_size)
        if len(data) == 0:
            return None
        logger.debug(
            'received %d bytes from %s' %
            (len(data), self.tag),
        )
        return memoryview(data)

    def has_buffer(self) -> bool:
        return len(self.buffer) > 0

    def queue(self, mv: memoryview) -> None:
        self.buffer.append(mv)

    async def flush(self) -> int:
        """Users must handle ConnectionError exceptions"""
        if not self.has_buffer():
            return 0
        sent = 0
        while self.buffer:
            mv = self.buffer.pop(0)
            self.writer.write(mv)
            sent += len(mv)
        await self.writer.drain()
        logger.debug('flushed %d bytes to %s' % (sent, self.tag))
        return sent

    def write_eof(self) -> None:
        """Half-closes our sending side, or closes fully when
        the transport cannot half-close."""
        if self.closed:
            return
        if self.writer.can_write_eof():
            self.writer.write_eof()
        else:   # pragma: no cover
            self.writer.close()

    async def close(self) -> bool:
        if not self.closed:
            self.closed = True
            self.writer.close()
            try:
                await self.writer.wait_closed()
            except ConnectionError as e:
                # Peer already went away, nothing left to close
                logger.debug('%s closed with error %r' % (self.tag, e))
        return self.closed
