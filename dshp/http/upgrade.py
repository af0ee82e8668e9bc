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

from typing import TYPE_CHECKING, NamedTuple, Optional

from ..core.connection import TcpClientConnection

if TYPE_CHECKING:   # pragma: no cover
    UpgradeFuture = asyncio.Future['Upgraded']
else:
    UpgradeFuture = asyncio.Future


class UpgradeFailed(Exception):
    """Raised to the tunnel when the connection could not be handed over."""
    pass


class Upgraded(NamedTuple):
    """Raw client connection after a CONNECT response was written."""
    client: TcpClientConnection
    # Bytes the client sent past the CONNECT request head
    leftover: bytes


class PendingUpgrade:
    """One-shot hand over of a client connection from the HTTP
    protocol handler to a CONNECT tunnel.

    Must be created before the CONNECT response is written.  The
    protocol handler resolves it after the 200 has been flushed, the
    tunnel task awaits it."""

    def __init__(self) -> None:
        self._future: UpgradeFuture = asyncio.get_running_loop().create_future()

    def complete(self, client: TcpClientConnection, leftover: Optional[memoryview] = None) -> None:
        if not self._future.done():
            self._future.set_result(
                Upgraded(client, leftover.tobytes() if leftover else b''),
            )

    def fail(self, reason: BaseException) -> None:
        if not self._future.done():
            self._future.set_exception(UpgradeFailed(str(reason) or reason.__class__.__name__))

    async def wait(self) -> Upgraded:
        return await self._future
