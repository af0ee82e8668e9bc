# -*- coding: utf-8 -*-
"""
    dshp
    ~~~~
    Dead simple forward HTTP proxy with CONNECT tunneling and
    optional Basic proxy authentication.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.

    .. spelling::

       http
"""
import logging

from typing import Optional

from .parser import HttpParser, httpParserTypes
from .exception import HttpProtocolException
from .responses import BAD_REQUEST_RESPONSE_PKT
from .proxy.types import ProxyResponse
from .proxy.dispatcher import RequestDispatcher
from ..core.connection import TcpClientConnection

logger = logging.getLogger(__name__)


class HttpProtocolHandler:
    """HTTP/1.x server loop for a single client connection.

    Reads one request at a time, hands it to the dispatcher and writes
    the response back, honouring keep-alive.  After a CONNECT response
    the connection is handed over to the tunnel and the loop ends
    without closing it.
    """

    def __init__(
            self,
            client: TcpClientConnection,
            dispatcher: RequestDispatcher,
    ) -> None:
        self.client = client
        self.dispatcher = dispatcher
        self.request: Optional[HttpParser] = None
        # Bytes received past the end of the last request
        self.pending: Optional[memoryview] = None
        self.upgraded: bool = False

    async def run(self) -> None:
        logger.debug('Accepted connection from %s' % self.client.address)
        try:
            while True:
                request = await self._read_request()
                if request is None:
                    break
                if await self._serve(request):
                    break
        except HttpProtocolException as e:
            logger.debug('Bad request from %s: %s' % (self.client.address, e))
            await self._respond_and_close(e.response(self.request) or BAD_REQUEST_RESPONSE_PKT)
        except ConnectionError as e:
            logger.debug('Client %s connection error: %r' % (self.client.address, e))
        finally:
            if not self.upgraded:
                await self.client.close()
                logger.debug('Closed client connection %s' % self.client.address)

    async def _read_request(self) -> Optional[HttpParser]:
        """Returns None when client closes before sending a complete request."""
        self.request = HttpParser(httpParserTypes.REQUEST_PARSER)
        if self.pending is not None:
            pending, self.pending = self.pending, None
            self.request.parse(pending)
        while not self.request.is_complete:
            data = await self.client.recv()
            if data is None:
                return None
            self.request.parse(data)
        return self.request

    async def _serve(self, request: HttpParser) -> bool:
        """Returns True when the connection must not serve further requests."""
        self.pending = request.buffer
        response: ProxyResponse = await self.dispatcher.dispatch(
            request, self.client.address,
        )
        self.client.queue(response.pkt)
        if response.upgrade is not None:
            try:
                await self.client.flush()
            except BaseException as e:
                # Includes cancellation, the tunnel must not wait forever
                response.upgrade.fail(e)
                raise
            response.upgrade.complete(self.client, self.pending)
            self.upgraded = True
            return True
        await self.client.flush()
        return response.conn_close or not request.is_keep_alive

    async def _respond_and_close(self, pkt: memoryview) -> None:
        self.client.queue(pkt)
        try:
            await self.client.flush()
        except ConnectionError as e:
            logger.debug('Unable to send error response to %s: %r' % (self.client.address, e))
