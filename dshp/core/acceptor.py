# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       acceptor
"""
import asyncio
import logging
import argparse
import threading

from typing import TYPE_CHECKING, Optional, Set

from .counter import RequestIdGenerator
from .listener import TcpSocketListener
from .connection import TcpClientConnection
from ..http.handler import HttpProtocolHandler
from ..http.proxy.dispatcher import RequestDispatcher
from ..common.config import ProxyConfig
from ..common.constants import DEFAULT_LOOP_STARTUP_TIMEOUT

if TYPE_CHECKING:   # pragma: no cover
    HandlerTask = asyncio.Task[None]
else:
    HandlerTask = asyncio.Task

logger = logging.getLogger(__name__)


class Acceptor(threading.Thread):
    """Runs the proxy's asyncio event loop in a dedicated thread.

    Accepts client connections on the bound listener socket and serves
    each with a :class:`~dshp.http.handler.HttpProtocolHandler` task.
    The request id generator lives here, one per server instance.
    """

    def __init__(
            self,
            flags: argparse.Namespace,
            listener: TcpSocketListener,
    ) -> None:
        super().__init__(name='dshp-acceptor', daemon=True)
        self.flags = flags
        self.listener = listener
        self.config = ProxyConfig.from_flags(flags)
        self.ids = RequestIdGenerator()
        self.dispatcher: Optional[RequestDispatcher] = None
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self.handlers: Set[HandlerTask] = set()
        self._ready = threading.Event()
        self._stopping: Optional[asyncio.Event] = None
        self._error: Optional[BaseException] = None

    def setup(self) -> None:
        self.start()
        if not self._ready.wait(DEFAULT_LOOP_STARTUP_TIMEOUT):
            raise TimeoutError('Acceptor did not start in time')
        if self._error is not None:
            raise self._error

    def shutdown(self) -> None:
        if self.loop is not None and self._stopping is not None and self.is_alive():
            self.loop.call_soon_threadsafe(self._stopping.set)
        self.join()

    def run(self) -> None:
        self.loop = asyncio.new_event_loop()
        asyncio.set_event_loop(self.loop)
        try:
            self.loop.run_until_complete(self._serve())
        except Exception as e:
            logger.exception('Acceptor exited with error')
            self._error = e
        finally:
            self._ready.set()
            self.loop.close()

    async def _serve(self) -> None:
        self._stopping = asyncio.Event()
        self.dispatcher = RequestDispatcher.from_config(self.config, self.ids)
        server = await asyncio.start_server(
            self._handle_client, sock=self.listener.sock,
        )
        self._ready.set()
        try:
            await self._stopping.wait()
        finally:
            server.close()
            await self._cancel_handlers()
            await self.dispatcher.shutdown()
            await server.wait_closed()

    async def _handle_client(
            self,
            reader: asyncio.StreamReader,
            writer: asyncio.StreamWriter,
    ) -> None:
        assert self.dispatcher is not None
        task = asyncio.current_task()
        assert task is not None
        self.handlers.add(task)
        try:
            await HttpProtocolHandler(
                TcpClientConnection(reader, writer),
                self.dispatcher,
            ).run()
        finally:
            self.handlers.discard(task)

    async def _cancel_handlers(self) -> None:
        handlers = list(self.handlers)
        for task in handlers:
            task.cancel()
        if handlers:
            await asyncio.gather(*handlers, return_exceptions=True)
