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

from typing import List, Optional, Tuple

from ..connection import TcpConnection
from ...common.constants import DEFAULT_BUFFER_SIZE

logger = logging.getLogger(__name__)


class TcpTunnel:
    """Full-duplex byte relay between a client and an upstream connection.

    Bytes are copied in both directions concurrently and without regard
    to message boundaries.  When one side reaches EOF the other side's
    sending half is shut down, the relay ends once both directions are
    done.  An I/O error in either direction closes both connections,
    which also unblocks the opposite direction.
    """

    def __init__(
            self,
            client: TcpConnection,
            upstream: TcpConnection,
            buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        self.client = client
        self.upstream = upstream
        self.buffer_size = buffer_size

    async def run(self, initial: Optional[bytes] = None) -> Tuple[int, int]:
        """Relays until both directions are done.

        ``initial`` bytes, already read from the client, are delivered
        upstream first.  Returns bytes relayed client to upstream and
        upstream to client.  Re-raises the first :exc:`OSError` seen."""
        try:
            if initial:
                self.upstream.queue(memoryview(initial))
                await self.upstream.flush()
            results = await asyncio.gather(
                self._pipe(self.client, self.upstream),
                self._pipe(self.upstream, self.client),
                return_exceptions=True,
            )
        finally:
            await self.client.close()
            await self.upstream.close()
        errors: List[BaseException] = [
            r for r in results if isinstance(r, BaseException)
        ]
        if errors:
            raise errors[0]
        sent, received = results
        assert isinstance(sent, int) and isinstance(received, int)
        return sent + len(initial or b''), received

    async def _pipe(self, src: TcpConnection, dst: TcpConnection) -> int:
        total = 0
        try:
            while True:
                data = await src.recv(self.buffer_size)
                if data is None:
                    break
                dst.queue(data)
                await dst.flush()
                total += len(data)
            dst.write_eof()
        except OSError:
            await src.close()
            await dst.close()
            raise
        logger.debug(
            'Relayed %d bytes from %s to %s' %
            (total, src.tag, dst.tag),
        )
        return total
